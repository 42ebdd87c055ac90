"""Chord tokens and transposition.

A chord is a root (``A``-``G`` plus an optional ``#`` or ``b``) followed by an
opaque suffix.  Only the root ever moves: ``"C/G"`` transposed up two
semitones is ``"D/G"``.  Slash-bass notes are left alone.
"""

import re
from collections.abc import Callable
from typing import NamedTuple

from .exceptions import InvalidChordError, UnknownNoteError
from .notes import NOTES, note_index, semitone_distance

ROOT_RE = re.compile(r"^([A-G][b#]?)(.*)$", re.DOTALL)


class ChordParts(NamedTuple):
    root: str
    suffix: str


def split_chord(text: str) -> ChordParts:
    """Split *text* into its root and suffix.

    Text without a leading ``A``-``G`` comes back with an empty root and the
    stripped text as the suffix.
    """
    if not text:
        return ChordParts("", "")
    m = ROOT_RE.match(text)
    if not m:
        return ChordParts("", text.strip())
    return ChordParts(m.group(1), m.group(2))


def transpose(chord: str, semitones: int, strict: bool = False) -> str:
    """Shift the root of *chord* by *semitones*, wrapping round the octave.

    The new root is always spelled with sharps.  A chord whose root cannot be
    read is returned unchanged, or raises when *strict* is set.
    """
    root, suffix = split_chord(chord)
    if not root:
        if strict:
            raise InvalidChordError(chord, "no root note")
        return chord
    index = note_index(root)
    if index is None:
        if strict:
            raise UnknownNoteError(root)
        return chord
    return NOTES[(index + semitones) % len(NOTES)] + suffix


def capo_fret(song_key: str, shape_key: str) -> int:
    """Fret to put the capo on so *shape_key* shapes sound in *song_key*."""
    return semitone_distance(shape_key, song_key)


def to_reference_shape(chord: str, song_key: str, shape_key: str, strict: bool = False) -> str:
    """Convert a chord in *song_key* to the shape fingered in *shape_key*.

    Example: in a song in D played with C shapes (capo 2), ``"A"`` becomes ``"G"``.
    """
    capo = semitone_distance(shape_key, song_key, strict=strict)
    return transpose(chord, -capo, strict=strict)


def shape_transform(song_key: str, shape_key: str, strict: bool = False) -> Callable[[str], str]:
    """Return a one-argument chord transform for :func:`format_chord_line`."""

    def _transform(chord: str) -> str:
        return to_reference_shape(chord, song_key, shape_key, strict=strict)

    return _transform
