import logging
from pathlib import Path
from typing import TextIO

import click

from .exceptions import UnknownNoteError
from .notes import require_note
from .parser import parse_song, split_songs
from .sheet import DEFAULT_SHAPE_KEYS, ChordSheetFormatter

SONG_SEPARATOR = "---"


def _validate_note(ctx: click.Context, param: click.Parameter, value):
    """Click callback: reject spellings outside A-G with an optional # or b."""
    if value is None:
        return None
    try:
        if isinstance(value, tuple):
            return tuple(require_note(v) for v in value)
        return require_note(value)
    except UnknownNoteError as exc:
        raise click.BadParameter(
            f"{exc.spelling!r} is not a note (use A-G with optional # or b)"
        ) from exc


@click.command()
@click.argument("input_file", metavar="INPUT", type=click.File("r", encoding="utf-8"), default="-")
@click.option("-o", "--output", "output_path", default=None, metavar="PATH",
              help="Write the sheets to PATH instead of stdout.")
@click.option("-s", "--shape", "shape_keys", multiple=True, callback=_validate_note,
              metavar="KEY", help="Shape key to render (repeatable, default: C and G).")
@click.option("-k", "--key", "song_key", default=None, callback=_validate_note,
              metavar="KEY", help="Override the song key instead of detecting it.")
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Log parsing details to stderr.")
def main(input_file: TextIO, output_path: str | None, shape_keys: tuple[str, ...],
         song_key: str | None, verbose: bool) -> None:
    """Turn chord-over-lyric song text into capo chord sheets.

    \b
    Songs are read from INPUT (default: stdin).  Separate several songs with
    a line of three or more hyphens.  Each song is printed once per shape
    key, with the capo fret needed to sound in the song's key.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # --- Parse ---
    blocks = split_songs(input_file.read())
    if not blocks:
        click.echo("No songs found in input.", err=True)
        return

    # --- Render ---
    formatters = [ChordSheetFormatter(shape) for shape in shape_keys or DEFAULT_SHAPE_KEYS]
    sheets: list[str] = []
    for block in blocks:
        song = parse_song(block)
        for formatter in formatters:
            sheets.append(formatter.render(song, key=song_key))
    text = f"\n{SONG_SEPARATOR}\n\n".join(sheets)

    # --- Output ---
    if output_path is None:
        click.echo(text, nl=False)
        return

    dest = Path(output_path)
    dest.write_text(text, encoding="utf-8")
    click.echo(f"Written to {dest}")
