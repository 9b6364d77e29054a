"""Command-line interface for hoon."""

import json
import logging
import pprint
import sys
from pathlib import Path
from typing import Optional, Tuple
import click
from .codec import JSONCodec
from .error_handler import ErrorHandler
from .storage import FileStore, WebStorage
from .transforms import padding
from .types import HoonError


def _fail(error: HoonError) -> None:
    response = ErrorHandler().handle_error(error)
    click.echo(f"❌ Error: {error}", err=True)
    click.echo(f"   {response.suggested_action}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(version="1.0.0")
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def main(verbose: bool):
    """hoon - encode, decode and store values that plain JSON loses."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument('input_file', type=click.File('r', encoding='utf-8'), default='-')
def encode(input_file):
    """Encode a standard JSON document into transport text."""
    try:
        data = json.load(input_file)
    except json.JSONDecodeError as e:
        click.echo(f"❌ Error: input is not JSON: {e.msg} at line {e.lineno}, column {e.colno}", err=True)
        sys.exit(1)

    try:
        click.echo(JSONCodec().encode(data))
    except HoonError as e:
        _fail(e)


@main.command()
@click.argument('input_file', type=click.File('r', encoding='utf-8'), default='-')
def decode(input_file):
    """Decode transport text and print the value."""
    try:
        value = JSONCodec().decode(input_file.read().strip())
    except HoonError as e:
        _fail(e)
    else:
        click.echo(pprint.pformat(value))


@main.command()
@click.argument('text')
@click.argument('length', type=int)
@click.option('--char', '-c', default='0', help='Pad unit (default: 0)')
@click.option('--right', '-r', is_flag=True, help='Pad on the right')
def pad(text: str, length: int, char: str, right: bool):
    """Pad TEXT to LENGTH with whole repetitions of a pad unit."""
    try:
        click.echo(padding(text, length, char, right))
    except HoonError as e:
        _fail(e)


@main.group()
@click.option('--file', '-f', 'store_file', required=True,
              type=click.Path(dir_okay=False, path_type=Path),
              help='JSON file backing the store')
@click.pass_context
def store(ctx: click.Context, store_file: Path):
    """Read and write a file-backed store."""
    ctx.obj = WebStorage(FileStore(store_file))


@store.command('set')
@click.argument('key')
@click.argument('value')
@click.pass_obj
def store_set(storage: WebStorage, key: str, value: str):
    """Store VALUE under KEY. VALUE is parsed as JSON, else kept as a string."""
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError:
        parsed = value

    try:
        storage.set_item(key, parsed)
    except HoonError as e:
        _fail(e)
    click.echo(f"✅ Stored {key}")


@store.command('get')
@click.argument('keys', nargs=-1)
@click.pass_obj
def store_get(storage: WebStorage, keys: Tuple[str, ...]):
    """Print the values under KEYS (every entry if none given)."""
    selected: Optional[list] = list(keys) if keys else None
    try:
        click.echo(pprint.pformat(storage.get(selected)))
    except HoonError as e:
        _fail(e)


@store.command('remove')
@click.argument('keys', nargs=-1)
@click.pass_obj
def store_remove(storage: WebStorage, keys: Tuple[str, ...]):
    """Remove KEYS (every entry if none given)."""
    try:
        storage.remove(list(keys) if keys else None)
    except HoonError as e:
        _fail(e)
    click.echo(f"✅ Removed {', '.join(keys) if keys else 'all entries'}")


@store.command('keys')
@click.pass_obj
def store_keys(storage: WebStorage):
    """List every key."""
    try:
        for key in storage.keys():
            click.echo(key)
    except HoonError as e:
        _fail(e)


if __name__ == '__main__':
    main()
