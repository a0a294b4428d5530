"""
Pipeline Notifier CLI

Replays CodePipeline events from JSON files, for checking a webhook or a
message layout without deploying the Lambda.

Usage:
    pipeline-notifier [OPTIONS] COMMAND [ARGS]...

Commands:
    preview   Print the Slack payloads an event would produce
    send      Route an event exactly like the Lambda handler
"""

import json
import logging
import sys
from typing import Any, Dict, List

import click
from dotenv import load_dotenv

from .api.client import ProductionCodePipelineClient
from .api.metadata import MetadataFetcher
from .config import NotifierConfig
from .errors import NotifierError
from .handler import build_router
from .models import DetailType, NotificationPayload, PipelineEvent
from .slack.formatter import MessageFormatter

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool, quiet: bool):
    """Configure logging to output to stderr."""
    if quiet:
        level = logging.WARNING
    else:
        level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(levelname)s %(name)s: %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def _load_event(path: str) -> Dict[str, Any]:
    with open(path, encoding='utf-8') as f:
        return json.load(f)


@click.group()
@click.option('-v', '--verbose', is_flag=True, help='Verbose output (show DEBUG logs)')
@click.option('-q', '--quiet', is_flag=True, help='Quiet mode (only show warnings/errors)')
@click.pass_context
def cli(ctx, verbose, quiet):
    """CodePipeline to Slack notifier."""
    load_dotenv()
    setup_logging(verbose, quiet)

    ctx.ensure_object(dict)
    try:
        ctx.obj['config'] = NotifierConfig.from_env()
    except NotifierError as e:
        raise click.ClickException(str(e))


@cli.command()
@click.argument('event_file', type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def preview(ctx, event_file):
    """Print the Slack payloads EVENT_FILE would produce, without posting."""
    config: NotifierConfig = ctx.obj['config']
    raw = _load_event(event_file)

    detail_type = DetailType.from_value(raw.get('detail-type'))
    if detail_type not in (DetailType.PIPELINE, DetailType.STAGE):
        click.echo(f"No notification for detail-type {raw.get('detail-type')!r}")
        return

    if detail_type == DetailType.PIPELINE and not config.notify_pipeline_events:
        click.echo("No notification: pipeline execution notifications are disabled")
        return

    fetcher = MetadataFetcher(
        ProductionCodePipelineClient(region_name=config.aws_region),
        strict_stage_lookup=config.strict_stage_lookup,
    )
    formatter = MessageFormatter(fetcher, region=config.console_region)

    try:
        event = PipelineEvent.from_event(raw)
        payloads: List[NotificationPayload] = []
        if event.detail_type == DetailType.PIPELINE:
            payloads.append(formatter.format_pipeline_execution_message(
                event.pipeline_name, event.execution_id, event.state, event.time
            ))
        else:
            if event.stage_name == config.build_stage_name:
                try:
                    payloads.append(formatter.format_build_metadata_message(
                        event.pipeline_name, event.execution_id
                    ))
                except NotifierError as e:
                    logger.warning("Build metadata notification would be skipped: %s", e)
            payloads.append(formatter.format_stage_execution_message(
                event.pipeline_name, event.stage_name, event.state
            ))
    except NotifierError as e:
        raise click.ClickException(str(e))

    for payload in payloads:
        click.echo(json.dumps(payload.to_dict(), indent=2))


@cli.command()
@click.argument('event_file', type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def send(ctx, event_file):
    """Route EVENT_FILE and post its notifications to Slack."""
    config: NotifierConfig = ctx.obj['config']
    raw = _load_event(event_file)

    try:
        result = build_router(config).route(raw)
    except NotifierError as e:
        raise click.ClickException(str(e))

    if result.is_skipped:
        click.echo(f"skipped: {result.message}")
    else:
        click.echo(result.data)


if __name__ == '__main__':
    cli()
