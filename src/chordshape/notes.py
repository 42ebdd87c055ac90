"""The 12-note chromatic alphabet and semitone arithmetic over it.

Canonical spellings use sharps.  Flats and the odd enharmonic edge cases
(``E#``, ``B#``, ``Cb``, ``Fb``) are accepted on input and mapped onto the
canonical spelling only when doing arithmetic.
"""

from .exceptions import UnknownNoteError

NOTES: tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

ENHARMONIC: dict[str, str] = {
    "Db": "C#",
    "Eb": "D#",
    "Gb": "F#",
    "Ab": "G#",
    "Bb": "A#",
    "Cb": "B",
    "E#": "F",
    "Fb": "E",
    "B#": "C",
}


def normalize(spelling: str) -> str:
    """Return the canonical spelling for *spelling*.

    Unrecognised spellings are returned unchanged.
    """
    return ENHARMONIC.get(spelling, spelling)


def note_index(spelling: str) -> int | None:
    """Return the 0-11 position of *spelling* in :data:`NOTES`, or ``None``."""
    try:
        return NOTES.index(normalize(spelling))
    except ValueError:
        return None


def is_valid_note(spelling: str) -> bool:
    return note_index(spelling) is not None


def require_note(spelling: str) -> str:
    """Return *spelling* unchanged, raising :class:`UnknownNoteError` if it is not a note."""
    if not is_valid_note(spelling):
        raise UnknownNoteError(spelling)
    return spelling


def semitone_distance(from_note: str, to_note: str, strict: bool = False) -> int:
    """Return the upward distance in semitones from *from_note* to *to_note*.

    The result is always in ``range(12)``.  An unrecognised spelling on either
    side gives ``0`` unless *strict* is set, in which case
    :class:`UnknownNoteError` is raised.
    """
    a = note_index(from_note)
    b = note_index(to_note)
    if a is None or b is None:
        if strict:
            raise UnknownNoteError(from_note if a is None else to_note)
        return 0
    return (b - a) % len(NOTES)
