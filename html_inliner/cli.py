# === FILE: html_inliner/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point for html_inliner.

Commands:
  inline    Inline every asset of an HTML file and print or save the result
  config    Show the effective configuration

Common options:
  --config PATH       YAML/JSON config file (default: configs/default.yaml if present)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (stderr only if omitted)
  --log-format FORMAT Logging format string

inline options:
  --output, -o PATH   Write the result to PATH instead of stdout
  --root DIR          Resolve relative references against DIR instead of the file's directory
  --no-fonts          Do not inline font files
  --no-remote         Do not fetch http(s) references
  --max-size BYTES    Size limit for inlined assets
  --strict            Fail on the first asset that cannot be resolved

Also:
  --version, -v       Show the html_inliner version

Example:
  html-inliner inline dist/index.html -o dist/standalone.html --no-remote
"""
import sys
from pathlib import Path

import click

from html_inliner import __version__
from html_inliner.config import load_config
from html_inliner.engine import Engine
from html_inliner.logger import init_logging

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='html_inliner, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML or JSON configuration file.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file (stderr only if omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Format string for log records'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """html_inliner command group."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Failed to load configuration: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('inline', context_settings=CONTEXT_SETTINGS)
@click.argument('input_path', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    '--output', '-o', 'output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Write the inlined HTML to this file'
)
@click.option(
    '--root', '-r', 'root',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Directory relative references are resolved against'
)
@click.option('--no-fonts', 'no_fonts', is_flag=True, help='Leave font files as references')
@click.option('--no-remote', 'no_remote', is_flag=True, help='Leave http(s) references untouched')
@click.option('--max-size', 'max_size', type=click.IntRange(min=0), default=None,
              help='Largest asset (bytes) that gets inlined')
@click.option('--strict', is_flag=True, help='Fail on the first unresolvable asset')
@click.pass_context
def inline(ctx, input_path, output, root, no_fonts, no_remote, max_size, strict):
    """Inline every asset referenced by INPUT_PATH."""
    cfg = ctx.obj['config']
    overrides = {}
    if no_fonts:
        overrides['inline_fonts'] = False
    if no_remote:
        overrides['inline_remote'] = False
    if max_size is not None:
        overrides['max_inline_size'] = max_size
    if strict:
        overrides['strict'] = True
    if overrides:
        cfg = cfg.model_copy(update=overrides)

    engine = Engine(cfg)
    try:
        if root is None:
            html = engine.inline_file(input_path)
        else:
            html = engine.inline_html(input_path.read_text(encoding='utf-8'), root)
    except Exception as e:
        print_error(f'Inlining failed: {e}')

    if output is None:
        click.echo(html)
        return
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(html, encoding='utf-8')
    except OSError as e:
        print_error(f'Failed to write {output}: {e}')
    click.echo(f'Inlined HTML: {output}', err=True)


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Print the effective configuration as JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
