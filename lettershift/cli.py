#!/usr/bin/env python3

import os
import sys
import logging
import click
import click_log
from tabulate import tabulate
from . import caesar, vigenere, tables, __version__
from . config import load_config, DEFAULT_CONFIG
from . errors import ConfigError
from . utils.alphabet import LANGUAGES

logger = logging.getLogger("lettershift")
click_log.basic_config(logger)

LANGUAGE = click.Choice(LANGUAGES, case_sensitive=False)
SHIFT_KEY = click.IntRange(caesar.MIN_KEY, caesar.MAX_KEY)

def run(message, forward, backward, decode, check):
    """
    Applies forward (or backward when decoding) and, if check is set, the
    inverse transformation, reporting whether the round trip gave message back.
    """
    if decode:
        forward, backward = backward, forward
    result = forward(message)
    click.echo(f"{'Decoded' if decode else 'Encoded'} message: {result}")
    if check:
        restored = backward(result)
        click.echo(f"{'Encoded' if decode else 'Decoded'} message: {restored}")
        if restored == message:
            click.secho("SUCCESS!", fg='green')
        else:
            click.secho("The round trip did not reproduce the original message", fg='red')
            sys.exit(-1)

def read_message(message):
    if message is None:
        message = click.prompt('[#] Please, enter a message', default='', show_default=False)
    return message

def language_option(ctx, language):
    if language is None:
        language = ctx.obj['config'].get('language')
        if language is not None and language not in LANGUAGES:
            click.secho(f"Unknown language '{language}' in the configuration, expected one of {', '.join(LANGUAGES)}", fg='red')
            sys.exit(-1)
    return language

@click.group()
@click.version_option(version=__version__)
@click.option('--debug/--no-debug', default=False)
@click.option('--config', type=click.Path(exists=True, dir_okay=False, resolve_path=True), required=False,
    help=f'YAML file with default keys and language [default: {DEFAULT_CONFIG} when present]')
@click.pass_context
def cli(ctx, debug, config):
    """Encode and decode messages with the Caesar and Vigenere ciphers (Latin and Cyrillic alphabets).
    """
    if not debug:
        logger.setLevel(logging.ERROR)
    else:
        logger.setLevel(logging.DEBUG)
    ctx.ensure_object(dict)
    if config is None and os.path.exists(DEFAULT_CONFIG):
        config = DEFAULT_CONFIG
    try:
        ctx.obj['config'] = load_config(config)
    except ConfigError as e:
        click.secho(str(e), fg='red')
        sys.exit(-1)

@cli.command('caesar')
@click.argument('message', required=False)
@click.option('--key', '-k', type=SHIFT_KEY, required=False, help='Shift amount')
@click.option('--decode', '-d', is_flag=True, default=False, help='Decode the message instead of encoding it')
@click.option('--check/--no-check', default=None, help='Apply also the inverse transformation and verify the round trip')
@click.pass_context
def caesar_cmd(ctx, message, key, decode, check):
    """
    Shifts each Latin or Cyrillic letter of MESSAGE by a fixed amount.
    """
    config = ctx.obj['config']
    if key is None:
        key = config['caesar'].get('key')
        if key is not None and not caesar.verify_key(key):
            click.secho(f"Invalid key {key!r} in the configuration, it should be between {caesar.MIN_KEY} and {caesar.MAX_KEY}", fg='red')
            sys.exit(-1)
    if key is None:
        key = click.prompt('[#] Please, enter a key size', type=SHIFT_KEY)
    if check is None:
        check = config['check']
    message = read_message(message)
    run(message, lambda m: caesar.encode(m, key), lambda m: caesar.decode(m, key), decode, check)

@cli.command('vigenere')
@click.argument('message', required=False)
@click.option('--language', '-l', type=LANGUAGE, required=False, help='Alphabet of both the key and the message')
@click.option('--key', '-k', type=str, required=False, help='Keyword')
@click.option('--decode', '-d', is_flag=True, default=False, help='Decode the message instead of encoding it')
@click.option('--check/--no-check', default=None, help='Apply also the inverse transformation and verify the round trip')
@click.pass_context
def vigenere_cmd(ctx, message, language, key, decode, check):
    """
    Shifts the letters of MESSAGE by the amounts given by the letters of a repeating keyword.
    """
    config = ctx.obj['config']
    language = language_option(ctx, language)
    if language is None:
        language = click.prompt('[#] Please, select the alphabet', type=LANGUAGE)

    def check_key(value):
        if not vigenere.verify_key(language, value):
            raise click.BadParameter(f"the key should contain only letters of the '{language}' alphabet")
        return value

    if key is not None:
        try:
            check_key(key)
        except click.BadParameter as e:
            e.param_hint = "'--key'"
            raise
    else:
        key = config['vigenere'].get('key')
        if key is not None and not vigenere.verify_key(language, key):
            click.secho(f"Invalid key {key!r} in the configuration for the '{language}' alphabet", fg='red')
            sys.exit(-1)
    if key is None:
        key = click.prompt('[#] Please, enter a key', value_proc=check_key)
    if check is None:
        check = config['check']
    message = read_message(message)
    run(message, lambda m: vigenere.encode(language, m, key), lambda m: vigenere.decode(language, m, key), decode, check)

@cli.command('table')
@click.option('--language', '-l', type=LANGUAGE, required=False, help='Alphabet to display [default: en]')
@click.option('--shift', '-s', type=SHIFT_KEY, required=False, help='Shift amount of a Caesar cipher')
@click.option('--keyword', '-w', type=str, required=False, help='Keyword of a Vigenere cipher')
@click.option('--markdown', is_flag=True, help='Output the table in markdown format')
@click.pass_context
def table_cmd(ctx, language, shift, keyword, markdown):
    """
    Shows the substitution table for a shift or for each letter of a keyword
    """
    if (shift is None) == (keyword is None):
        click.secho("You should provide either --shift or --keyword", fg='red')
        sys.exit(-1)
    language = language_option(ctx, language) or 'en'
    if keyword is not None:
        if not vigenere.verify_key(language, keyword):
            click.secho(f"The keyword '{keyword}' contains characters outside the '{language}' alphabet", fg='red')
            sys.exit(-1)
        rows = tables.keyword_table(language, keyword)
    else:
        rows = tables.shift_table(language, shift)
    click.echo(tabulate(rows[1:], headers=rows[0], tablefmt="pipe" if markdown else "simple_grid", disable_numparse=True))

def main_cli():
    cli(obj={})

if __name__ == '__main__':
    main_cli()
