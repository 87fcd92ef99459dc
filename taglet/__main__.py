import json
import logging
from collections import namedtuple

import click

from .group import MAX_DEPTH
from .errors import MarkupError


def maybe_exit(ctx, exit_code=-1):
    if not ctx.obj.debug:
        ctx.exit(exit_code)


GlobalOptions = namedtuple('GlobalOptions', 'verbose debug')


@click.group()
@click.option('-v', '--verbose', is_flag=True)
@click.option('--debug', is_flag=True)
@click.pass_context
def cli(ctx, verbose, debug):
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level)
    ctx.obj = GlobalOptions(verbose, debug)


@cli.command('render')
@click.argument('source', type=click.File(encoding='utf-8'))
@click.argument('output', type=click.File(mode='w+', encoding='utf-8'),
                default='-')
@click.option('--strict', is_flag=True, help='Fail on malformed descriptions.')
@click.option('--max-depth', type=int, default=MAX_DEPTH, show_default=True)
@click.pass_context
def render(ctx, source, output, strict, max_depth):
    """Render description tree from the JSON file into HTML.

    Keys of the JSON objects are tag-directive tokens, their values are
    element descriptions, content is stored under the "%content%" key."""
    from .html import Synthesizer

    try:
        tree = json.load(source)
    except ValueError:
        click.echo('Failed to parse source file.', err=True)
        maybe_exit(ctx)
        raise

    if not isinstance(tree, dict):
        click.echo('Description tree should be a JSON object.', err=True)
        ctx.exit(-1)

    synthesizer = Synthesizer(strict=strict, max_depth=max_depth)
    try:
        html = synthesizer.group(tree)
    except MarkupError as e:
        click.echo('Failed to render description tree:\n{}'.format(e),
                   err=True)
        maybe_exit(ctx)
        raise
    else:
        output.write(html)


@cli.command('element')
@click.argument('token')
@click.argument('args', nargs=-1)
@click.option('--strict', is_flag=True)
@click.pass_context
def element(ctx, token, args, strict):
    """Build single element from attribute names, values and content."""
    from .html import Synthesizer

    try:
        html = Synthesizer(strict=strict).element(token, *args)
    except MarkupError as e:
        click.echo('Failed to build element:\n{}'.format(e), err=True)
        maybe_exit(ctx)
        raise
    else:
        click.echo(html)


@cli.command('directives')
@click.argument('token')
def directives(token):
    """Show how tag-directive token is interpreted."""
    from .directives import parse_tag

    for name, value in parse_tag(token)._asdict().items():
        click.echo('{}: {}'.format(name, value))


if __name__ == '__main__':
    cli.main(prog_name='python -m taglet')
