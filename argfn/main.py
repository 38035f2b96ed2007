# -*- coding: utf-8 -*-
#
# Copyright (c) 2017~2999 - cologler <skyoflw@gmail.com>
# ----------
#
# ----------

#pylint: disable=C0111,C0103

import sys
import json
import traceback
import logging

import click

from .consts import DEFAULT_TABLE_NAME
from .table_file import TableFile, TableFileError

logging.basicConfig()
logger = logging.getLogger('arg-fn')


def _open_table(ctx: click.Context, path) -> TableFile:
    table_file = TableFile(path)
    if not table_file.is_table_file():
        ctx.fail('{path} is not a table file.'.format(
            path=click.style(str(path), fg='green')
        ))
    return table_file

def _build_parser(ctx: click.Context, table_file: TableFile, unknown):
    try:
        return table_file.build_parser(unknown)
    except TableFileError as err:
        ctx.fail(str(err))

table_option = click.option('--table', 'table', default=DEFAULT_TABLE_NAME, show_default=True,
                            help='path of the flag table file.')

@click.group()
@click.option('--verbose', is_flag=True, help='show debug logs.')
def cli(verbose):
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

@cli.command(context_settings={'ignore_unknown_options': True})
@table_option
@click.option('--strict', is_flag=True, help='fail if any token is not a flag.')
@click.argument('tokens', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def run(ctx: click.Context, table, strict, tokens):
    'dispatch tokens through the flag table and print the config'
    table_file = _open_table(ctx, table)
    unknowns = []

    def on_unknown(config, token):
        logger.warning(f'unknown flag: {token}')
        unknowns.append(token)

    config = _build_parser(ctx, table_file, on_unknown).parse(tokens)
    if strict and unknowns:
        ctx.fail('unknown flags: {}'.format(' '.join(unknowns)))
    click.echo(json.dumps(config, sort_keys=True))

@cli.command()
@table_option
@click.pass_context
def show(ctx: click.Context, table):
    'list flags of the flag table'
    table_file = _open_table(ctx, table)
    try:
        flags = table_file.flags
    except TableFileError as err:
        ctx.fail(str(err))
    for name in sorted(flags):
        click.echo(f'{name}\t{json.dumps(flags[name], sort_keys=True)}')


def main(argv=None):
    if argv is None:
        argv = sys.argv
    try:
        logger.setLevel(level=logging.INFO)
        return cli.main(args=argv[1:], prog_name='argfn')
    except Exception: # pylint: disable=W0703
        traceback.print_exc()
        return 1

if __name__ == '__main__':
    main()
