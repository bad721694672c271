# term-cache - Cached lookup of ontology terms
# Copyright © 2026 Damien Goutte-Gattat
#
# This file is part of the term-cache project and distributed under
# the terms of the MIT license. See the LICENSE.md file in that project
# for the detailed conditions.

import logging
from configparser import ConfigParser, Error as ConfigParserError
from os.path import exists

import click
from click_shell import shell
from IPython import embed

from fbcam.termcache import __version__
from fbcam.termcache.errors import TermCacheError
from fbcam.termcache.registry import get_default_registry
from fbcam.termcache.router import PrefixRouter

prog_name = "termcache"
prog_notice = f"""\
{prog_name} {__version__}
Copyright © 2026 Damien Goutte-Gattat

This program is released under the terms of the MIT license.
"""


class TermCacheContext(object):
    def __init__(self, config_file):
        self._config_file = config_file
        self._router = None

    @property
    def config_file(self):
        return self._config_file

    @property
    def router(self):
        if self._router is None:
            if not exists(self._config_file):
                raise click.ClickException(
                    f"Configuration file {self._config_file} not found"
                )
            try:
                self._router = PrefixRouter(self._config_file)
            except TermCacheError as e:
                raise click.ClickException(str(e))
        return self._router


@shell(context_settings={'help_option_names': ['-h', '--help']}, prompt="termcache> ")
@click.version_option(version=__version__, message=prog_notice)
@click.option(
    '--config',
    '-c',
    type=click.Path(exists=False),
    default='{}/ontologies.ini'.format(click.get_app_dir('termcache')),
    help="Path to an alternative configuration file.",
)
@click.option(
    '--verbose', '-v', is_flag=True, default=False, help="Show debugging messages."
)
@click.pass_context
def main(ctx, config, verbose):
    """Look up ontology terms by their identifiers."""

    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(format="termcache: %(module)s: %(message)s", level=level)

    if not '/' in config and not exists(config):
        config = '{}/{}'.format(click.get_app_dir('termcache'), config)

    ctx.obj = TermCacheContext(config)


@main.command()
@click.argument('ids', nargs=-1, required=True)
@click.pass_obj
def lookup(ctx, ids):
    """Print the terms associated with the given IDs."""

    router = ctx.router
    for identifier in ids:
        try:
            term = router.get_term(identifier)
        except TermCacheError as e:
            raise click.ClickException(str(e))
        click.echo(f"{identifier}\t{term}")


@main.command()
@click.pass_obj
def describe(ctx):
    """Show details about the configured ontologies."""

    click.echo(ctx.router.describe())


@main.command()
@click.argument('expected', type=click.Path(exists=True))
@click.pass_obj
def check(ctx, expected):
    """Check terms against expected values.

    EXPECTED is a properties file of ID=term lines. Each ID is looked up
    and compared with the expected term.
    """

    # IDs contain the ':' character, which must not act as a delimiter
    parser = ConfigParser(
        interpolation=None, delimiters=('=',), comment_prefixes=('#', '!')
    )
    parser.optionxform = str
    with open(expected, 'r', encoding='utf-8') as f:
        text = f.read()
    try:
        parser.read_string('[expected]\n' + text, source=expected)
    except ConfigParserError as e:
        raise click.ClickException(f"Invalid expectations file {expected}: {e}")

    router = ctx.router
    errors = 0
    for identifier, term in parser.items('expected'):
        try:
            found = router.get_term(identifier)
        except TermCacheError as e:
            click.echo(f"{identifier}: {e}", err=True)
            errors += 1
            continue
        if found != term:
            click.echo(f"{identifier}: expected '{term}', found '{found}'", err=True)
            errors += 1

    if errors > 0:
        raise click.ClickException(f"{errors} term(s) did not match")
    click.echo("All terms match")


@main.command()
def formats():
    """List the supported ontology formats."""

    for key in get_default_registry().formats:
        click.echo(key)


@main.command()
@click.pass_obj
def ipython(ctx):
    """Start an interactive Python shell."""

    router = ctx.router
    embed()


if __name__ == '__main__':
    main()
