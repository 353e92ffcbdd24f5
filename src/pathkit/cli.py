"""Command-line interface for pathkit."""
import logging
import sys
from typing import Tuple

import click
from rich.markup import escape

from .core.errors import PathError
from .core.flavor import host_flavor
from .core.models import Config
from .core.purepath import PurePath
from .path import Path
from .utils.console import THEMES, ConsoleManager


def setup_logging(debug: bool, level_name: str = 'WARNING') -> None:
    """Configure logging based on debug flag and configured level."""
    level = logging.DEBUG if debug else getattr(logging, level_name.upper(), logging.WARNING)
    format_string = '[%(levelname)s] %(message)s'

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def _fail(ctx: click.Context, message: str) -> None:
    ctx.obj['console'].print_error(f"ERROR: {message}")
    ctx.exit(1)


def _parse(ctx: click.Context, raw: str) -> PurePath:
    return PurePath.parse(raw, ctx.obj['config'].get_flavor())


@click.group()
@click.option('--flavor', '-F', type=click.Choice(['posix', 'windows']),
              help='Path rules to parse with (default: PATHKIT_FLAVOR or the host)')
@click.option('--theme', '-t', type=click.Choice(sorted(THEMES)),
              help='Terminal color theme')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.version_option(package_name='pathkit')
@click.pass_context
def main(ctx: click.Context, flavor: str, theme: str, debug: bool) -> None:
    """
    Parse, join and match filesystem paths without touching the disk.

    Examples:

        pathkit inspect 'C:\\dir\\file.tar.gz' --flavor windows

        pathkit safe-join /srv/www ../../etc/passwd

        pathkit match /a/b/c.txt '*.txt'
    """
    config = Config()
    if flavor:
        config.flavor = flavor
    if theme:
        config.theme = theme

    setup_logging(debug, config.log_level)

    ctx.ensure_object(dict)
    ctx.obj['config'] = config
    ctx.obj['console'] = ConsoleManager(theme=config.theme)

    try:
        config.get_flavor()
    except ValueError as e:
        _fail(ctx, str(e))


@main.command()
@click.argument('path')
@click.pass_context
def inspect(ctx: click.Context, path: str) -> None:
    """Show the components of PATH."""
    pure = _parse(ctx, path)
    rows = [
        ('flavor', pure.flavor.name),
        ('drive', pure.drive),
        ('root', pure.root),
        ('anchor', pure.anchor),
        ('parts', ', '.join(pure.parts)),
        ('dirname', pure.dirname),
        ('filename', pure.filename),
        ('basename', pure.basename),
        ('extension', pure.extension),
        ('extensions', ', '.join(pure.extensions)),
        ('absolute', str(pure.is_absolute())),
        ('reserved', str(pure.is_reserved())),
        ('posix', pure.as_posix()),
    ]
    ctx.obj['console'].print_components(str(pure), rows)


@main.command()
@click.argument('base')
@click.argument('fragments', nargs=-1, required=True)
@click.pass_context
def join(ctx: click.Context, base: str, fragments: Tuple[str, ...]) -> None:
    """Join FRAGMENTS onto BASE (no '..' collapsing)."""
    click.echo(str(_parse(ctx, base).join(*fragments)))


@main.command('safe-join')
@click.argument('base')
@click.argument('candidate')
@click.pass_context
def safe_join(ctx: click.Context, base: str, candidate: str) -> None:
    """Join CANDIDATE onto BASE, refusing to leave BASE."""
    success, joined = _parse(ctx, base).try_safe_join(candidate)
    if not success:
        _fail(ctx, f"Traversal rejected: {candidate!r} escapes {base!r}")
    click.echo(str(joined))


@main.command()
@click.argument('path')
@click.argument('pattern')
@click.pass_context
def match(ctx: click.Context, path: str, pattern: str) -> None:
    """Exit 0 if PATH matches the glob PATTERN, 1 otherwise."""
    try:
        matched = _parse(ctx, path).match(pattern)
    except PathError as e:
        _fail(ctx, str(e))
    click.echo('match' if matched else 'no match')
    ctx.exit(0 if matched else 1)


@main.command('relative-to')
@click.argument('path')
@click.argument('ancestor')
@click.pass_context
def relative_to(ctx: click.Context, path: str, ancestor: str) -> None:
    """Print PATH relative to ANCESTOR."""
    try:
        click.echo(str(_parse(ctx, path).relative_to(ancestor)))
    except PathError as e:
        _fail(ctx, str(e))


@main.command()
@click.argument('path')
@click.pass_context
def uri(ctx: click.Context, path: str) -> None:
    """Print PATH as a file URI."""
    try:
        click.echo(_parse(ctx, path).to_uri())
    except PathError as e:
        _fail(ctx, str(e))


@main.command()
@click.argument('directory', default='.')
@click.option('--pattern', '-p', help='Only list entries matching this glob')
@click.option('--exclude', '-x', multiple=True, help='Glob of entries to leave out (repeatable)')
@click.option('--hidden/--no-hidden', default=True, help='Include entries whose name starts with a dot')
@click.pass_context
def ls(ctx: click.Context, directory: str, pattern: str, exclude: Tuple[str, ...],
       hidden: bool) -> None:
    """List DIRECTORY, optionally filtered by glob."""
    console = ctx.obj['console']
    if ctx.obj['config'].get_flavor() != host_flavor():
        _fail(ctx, "Directory listing needs the host path flavor")
    try:
        entries = Path(directory).list_dir(pattern=pattern, exclude=exclude, include_hidden=hidden)
    except OSError as e:
        _fail(ctx, str(e))
    for entry in entries:
        style = 'highlight' if entry.is_dir() else 'path'
        console.print(f"[{style}]{escape(entry.filename)}[/{style}]")
    console.print(f"[dim]{len(entries)} entries[/dim]")


if __name__ == '__main__':
    main()
