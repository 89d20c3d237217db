"""CLI entry point for chatroom."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from chatroom import __version__
from chatroom.l1_entities.chat_message import MessageType

log = logging.getLogger('chatroom.cli')


@click.group()
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Path to YAML config file.',
)
@click.option(
    '--log-dir',
    default=None,
    type=click.Path(file_okay=False),
    help='Write a debug log into this directory.',
)
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx, config_path, log_dir):
    """chatroom -- compose and render chat messages."""
    from pydantic import ValidationError  # noqa: PLC0415 -- deferred: not needed for --help

    from chatroom.l1_entities.errors import ConfigFileError  # noqa: PLC0415 -- deferred: not needed for --help
    from chatroom.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlConfigLoader,
    )
    from chatroom.l4_frameworks_and_drivers.infra_config import (  # noqa: PLC0415 -- deferred: not needed for --help
        build_app_config,
    )

    if log_dir:
        from chatroom.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: only with --log-dir
            setup_file_logging,
        )

        setup_file_logging(Path(log_dir))

    loader = YamlConfigLoader()
    try:
        path = loader.resolve(config_path)
        ctx.obj = build_app_config(loader.read(path))
    except (FileNotFoundError, ConfigFileError) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)
    except ValidationError as e:
        click.echo(f'Error: invalid config in {path}:\n{e}', err=True)
        sys.exit(1)
    log.debug('Loaded config from %s', path or 'built-in defaults')


@cli.command()
@click.option(
    '-t',
    '--type',
    'type_token',
    required=True,
    type=click.Choice([t.value for t in MessageType]),
    help='Message type.',
)
@click.option('-s', '--sender', default=None, help='Sender name (defaults to chat.default_sender).')
@click.option('-m', '--content', default=None, help='Message body.')
@click.pass_obj
def compose(config, type_token, sender, content):
    """Build a message and print its JSON encoding."""
    from chatroom.l2_use_cases.compose_message_use_case import (  # noqa: PLC0415 -- deferred: not needed for --help
        ComposeMessageUseCase,
    )
    from chatroom.l3_interface_adapters.gateways.json_message_codec import (  # noqa: PLC0415 -- deferred: not needed for --help
        JsonMessageCodec,
    )

    use_case = ComposeMessageUseCase(config.chat.default_sender)
    message = use_case.execute(MessageType(type_token), sender=sender, content=content)
    click.echo(JsonMessageCodec().encode(message))


@cli.command()
@click.argument('source', type=click.File('r', encoding='utf-8'), default='-')
@click.pass_obj
def render(config, source):
    """Print JSON-lines messages from SOURCE (default stdin) as display lines."""
    from chatroom.l1_entities.errors import MessageDecodeError  # noqa: PLC0415 -- deferred: not needed for --help
    from chatroom.l2_use_cases.render_message_use_case import (  # noqa: PLC0415 -- deferred: not needed for --help
        RenderMessageUseCase,
    )
    from chatroom.l3_interface_adapters.gateways.json_message_codec import (  # noqa: PLC0415 -- deferred: not needed for --help
        JsonMessageCodec,
    )

    renderer = RenderMessageUseCase(config.display)
    count = 0
    try:
        for _, message in JsonMessageCodec().decode_lines(source):
            click.echo(renderer.execute(message))
            count += 1
    except MessageDecodeError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)
    except UnicodeDecodeError as e:
        click.echo(f'Error: input is not valid UTF-8 ({e.reason})', err=True)
        sys.exit(1)
    log.debug('Rendered %d messages', count)
