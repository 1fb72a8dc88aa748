"""CLI entry point for relay-chat."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from relay_chat import __version__


@click.command()
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Path to YAML config file.',
)
@click.option(
    '-u',
    '--url',
    default=None,
    help='Backend endpoint URL (overrides backend.url from config).',
)
@click.option(
    '-p',
    '--prompt',
    default=None,
    help='Send a single prompt, print the reply and exit (no TUI).',
)
@click.option(
    '--log-dir',
    default=None,
    type=click.Path(file_okay=False),
    help='Directory for rc_debug.log (default: platform log directory).',
)
@click.version_option(version=__version__)
def cli(config_path, url, prompt, log_dir):
    """relay-chat -- terminal chat client that relays prompts to an HTTP backend."""
    from relay_chat.l3_interface_adapters.gateways.paths import (  # noqa: PLC0415 -- deferred: platformdirs not loaded on --help
        LOG_DIR,
    )
    from relay_chat.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: yaml and httpx stacks not loaded on --help
        DependencyContainer,
    )
    from relay_chat.l4_frameworks_and_drivers.infra_config import (  # noqa: PLC0415 -- deferred: not needed for --help
        InfraConfig,
        build_app_config,
    )
    from relay_chat.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: not needed for --help
        setup_file_logging,
    )

    config_loader = DependencyContainer.config_loader()

    try:
        overrides: dict = {}
        if url:
            overrides['backend'] = {'url': url}
        raw = config_loader.load_raw(config_path, overrides=overrides if overrides else None)
        config = build_app_config(raw)
        infra = InfraConfig.model_validate(raw)
    except (FileNotFoundError, ValueError) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    resolved_log_dir = Path(log_dir) if log_dir else LOG_DIR

    container = DependencyContainer(config, infra)

    if prompt is not None:
        from relay_chat.l4_frameworks_and_drivers.oneshot_runner import (  # noqa: PLC0415 -- deferred: one-shot mode only
            run_oneshot,
        )

        setup_file_logging(resolved_log_dir)
        code = run_oneshot(prompt, container.backend, fallback_text=config.chat.fallback_text)
        if code:
            sys.exit(code)
        return

    _preflight_backend(container)

    from relay_chat.l4_frameworks_and_drivers.app import (  # noqa: PLC0415 -- deferred: Textual TUI not loaded for --help or --prompt
        App,
    )

    app = App(
        config=config,
        container=container,
        log_dir=resolved_log_dir,
    )
    app.run()


def _preflight_backend(container) -> bool:
    ok, err = container.backend.check_connectivity()
    if not ok:
        click.echo(f'Warning: backend not reachable ({err}). Replies will fail until it is up.', err=True)
    return ok
