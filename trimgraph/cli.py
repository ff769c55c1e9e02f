#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Command-line interface for trimgraph.

This module provides the main CLI entry point and its subcommands: trimming
a GFA graph down to selected paths/walks, and managing configuration files.
"""

import logging
import sys
import click
from pathlib import Path
import yaml

from .version import __version__
from .config import ConfigParser, ConfigValidationError, TEMPLATES, save_config_template, validate_config
from .errors import TrimGraphError
from .pipeline import trim_graph_file

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _configure_logging(level: str):
    logging.basicConfig(level=getattr(logging, level.upper()), format=LOG_FORMAT,
                        stream=sys.stderr, force=True)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.option('--quiet', '-q', is_flag=True, help='Only log errors')
@click.pass_context
def main(ctx, verbose, quiet):
    """
    trimgraph: reduce a GFA graph to the segments, links and jumps used by
    a chosen set of paths and walks.
    """
    ctx.ensure_object(dict)
    ctx.obj['VERBOSE'] = verbose
    ctx.obj['QUIET'] = quiet


# ============================================================================
# Trimming
# ============================================================================

@main.command()
@click.argument('graph', type=click.Path(exists=True, dir_okay=False))
@click.option('--paths-to-keep', '-p', type=click.Path(exists=True, dir_okay=False),
              help='File listing path/walk names to keep (default: keep all)')
@click.option('--output', '-o', type=click.Path(dir_okay=False),
              help='Output GFA file (default: stdout)')
@click.option('--threads', '-t', type=click.IntRange(min=0),
              help='Worker threads (default: 4, 0 = all cores)')
@click.option('--ignore-segments', '-S', is_flag=True,
              help='Do not remove any segment lines')
@click.option('--ignore-links', '-L', is_flag=True,
              help='Do not remove any link lines')
@click.option('--ignore-jumps', '-J', is_flag=True,
              help='Do not remove any jump lines')
@click.option('--on-unknown', type=click.Choice(['error', 'warn']),
              help='What to do when a requested name is not in the graph (default: error)')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True, dir_okay=False),
              help='Configuration file (YAML)')
@click.pass_context
def trim(ctx, graph, paths_to_keep, output, threads, ignore_segments, ignore_links,
         ignore_jumps, on_unknown, config_file):
    """Trim GRAPH to the sub-graph used by the selected paths and walks."""
    try:
        config = ConfigParser(config_file)
        config.merge_cli_overrides({
            'execution.threads': threads,
            'filter.ignore_segments': ignore_segments or None,
            'filter.ignore_links': ignore_links or None,
            'filter.ignore_jumps': ignore_jumps or None,
            'filter.unknown_selection': on_unknown,
        })
        options = config.to_trim_options()

        level = config.get('logging.level', 'INFO')
        if ctx.obj.get('VERBOSE'):
            level = 'DEBUG'
        elif ctx.obj.get('QUIET'):
            level = 'ERROR'
        _configure_logging(level)

        trim_graph_file(graph, output, paths_to_keep, options)
    except (TrimGraphError, ConfigValidationError, OSError, UnicodeDecodeError) as e:
        click.echo(f"✗ Error: {e}", err=True)
        sys.exit(1)


# ============================================================================
# Configuration Management Commands
# ============================================================================

@main.group()
def config():
    """Configuration management commands."""
    pass


@config.command('init')
@click.option('--output', '-o', type=click.Path(), default='trimgraph_config.yaml',
              help='Output configuration file path')
@click.option('--template', '-t', type=click.Choice(list(TEMPLATES)), default='default',
              help='Configuration template type')
def config_init(output, template):
    """Generate a template configuration file with all available parameters."""
    click.echo(f"Generating {template} configuration template: {output}")

    try:
        save_config_template(Path(output), template=template)
    except OSError as e:
        click.echo(f"✗ Error creating configuration: {e}", err=True)
        sys.exit(1)
    click.echo(f"✓ Configuration file created: {output}")


@config.command('validate')
@click.argument('config_file', type=click.Path(exists=True))
def config_validate(config_file):
    """Validate a configuration file."""
    click.echo(f"Validating configuration file: {config_file}")

    try:
        config = ConfigParser(config_file).to_dict()
    except (ConfigValidationError, OSError) as e:
        click.echo(f"✗ Error validating configuration: {e}", err=True)
        sys.exit(1)

    errors = validate_config(config)
    if errors:
        click.echo("\n✗ Configuration validation failed:")
        for error in errors:
            click.echo(f"  • {error}", err=True)
        sys.exit(1)

    click.echo("✓ Configuration is valid")


@config.command('show')
@click.argument('config_file', type=click.Path(exists=True))
@click.option('--format', '-f', type=click.Choice(['yaml', 'summary']), default='summary',
              help='Output format')
def config_show(config_file, format):
    """Display configuration settings."""
    try:
        config = ConfigParser(config_file)
    except (ConfigValidationError, OSError) as e:
        click.echo(f"✗ Error reading configuration: {e}", err=True)
        sys.exit(1)

    if format == 'yaml':
        click.echo(yaml.dump(config.to_dict(), default_flow_style=False, sort_keys=False))
        return

    threads = config.get('execution.threads')
    click.echo(f"Configuration from: {config_file}")
    click.echo("=" * 60)
    click.echo(f"  Threads: {'all cores' if threads == 0 else threads}")
    for kind in ('segments', 'links', 'jumps'):
        state = 'kept as-is' if config.get(f'filter.ignore_{kind}') else 'filtered'
        click.echo(f"  {kind.capitalize()}: {state}")
    click.echo(f"  Unknown selection: {config.get('filter.unknown_selection')}")
    click.echo(f"  Log level: {config.get('logging.level')}")


if __name__ == '__main__':
    sys.exit(main())
