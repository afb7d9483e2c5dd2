"""CLI entry point for pyvoxtral."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from pyvoxtral import __version__


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
    '-m',
    '--model-dir',
    default=None,
    envvar='VOXTRAL_MODEL_DIR',
    type=click.Path(exists=True, file_okay=False),
    help='Voxtral model directory (overrides engine.model_dir).',
)
@click.option(
    '-L',
    '--library',
    'library_path',
    default=None,
    envvar='VOXTRAL_LIBRARY',
    type=click.Path(),
    help='Path to libgovoxtral (default: ./libgovoxtral.so or .dylib).',
)
@click.option('--ffmpeg', default=None, help='ffmpeg executable to use for resampling.')
@click.option(
    '--debug-log',
    default=None,
    type=click.Path(dir_okay=False),
    help='Write a DEBUG log to this file.',
)
@click.argument('audio_files', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.version_option(version=__version__)
def cli(config_path, model_dir, library_path, ffmpeg, debug_log, audio_files):
    """pyvoxtral -- transcribe audio files with the native Voxtral engine."""
    import yaml  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
    from pydantic import ValidationError  # noqa: PLC0415 -- deferred: not needed for --help

    from pyvoxtral.l1_entities.errors import VoxtralError  # noqa: PLC0415 -- deferred: not needed for --help
    from pyvoxtral.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlConfigLoader,
    )
    from pyvoxtral.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: ctypes binding not loaded on --help
        DependencyContainer,
    )
    from pyvoxtral.l4_frameworks_and_drivers.infra_config import (  # noqa: PLC0415 -- deferred: not needed for --help
        build_app_config,
    )

    if debug_log:
        from pyvoxtral.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: only with --debug-log
            setup_file_logging,
        )

        setup_file_logging(Path(debug_log))

    try:
        raw = YamlConfigLoader().load_raw(config_path, overrides=_cli_overrides(model_dir, library_path, ffmpeg))
        config = build_app_config(raw)
    except FileNotFoundError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)
    except (yaml.YAMLError, ValidationError) as e:
        click.echo(f'Error: invalid configuration: {e}', err=True)
        sys.exit(1)

    if not config.engine.model_dir:
        raise click.UsageError('No model directory given. Use --model-dir or set VOXTRAL_MODEL_DIR.')

    try:
        container = DependencyContainer(config)
        container.session.load(config.engine.model_dir)
        for audio_file in audio_files:
            text = container.session.transcribe(audio_file)
            if len(audio_files) > 1:
                click.echo(f'{Path(audio_file).name}: {text}')
            else:
                click.echo(text)
    except VoxtralError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)


def _cli_overrides(model_dir: str | None, library_path: str | None, ffmpeg: str | None) -> dict | None:
    """Map command-line options onto the config tree; None when nothing was given."""
    engine: dict = {}
    if model_dir:
        engine['model_dir'] = model_dir
    if library_path:
        engine['library_path'] = library_path
    overrides: dict = {}
    if engine:
        overrides['engine'] = engine
    if ffmpeg:
        overrides['conversion'] = {'ffmpeg': ffmpeg}
    return overrides or None
