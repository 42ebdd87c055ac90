"""Raw chord-sheet text → :class:`~chordshape.models.ParsedSong`.

Algorithm
---------
1. Work out the song key (:func:`detect_key`).
2. Walk the lines with a two-state machine (no section open / section open):

   - blank lines are skipped;
   - a section label flushes the open section and opens a new one;
   - a chord line consumes itself and the line below as one entry, opening an
     unlabelled section first if none is open;
   - any other line is a lyric-only entry, or is dropped when no section is
     open yet (titles, ``Key:`` lines and other preamble).

3. Flush the open section at end of input.

Multiple songs in one text are separated by a line of three or more hyphens;
:func:`split_songs` cuts them apart before parsing.
"""

import logging
import re
from enum import Enum, auto

from .chords import split_chord
from .models import LineEntry, ParsedSong, Section
from .scanner import (
    LineType,
    classify_line,
    clean_section_label,
    extract_chords,
    is_section_label,
    looks_like_chords,
)

logger = logging.getLogger(__name__)

DEFAULT_KEY = "C"

KEY_DECLARATION_RE = re.compile(r"^Key[:\s]+([A-G][b#]?)(?![\w#])", re.IGNORECASE | re.MULTILINE)

SONG_SEPARATOR_RE = re.compile(r"^-{3,}[ \t]*$", re.MULTILINE)


# ---------------------------------------------------------------------------
# Key detection
# ---------------------------------------------------------------------------


def detect_key(text: str) -> str:
    """Return the song key declared in *text*, or the best guess at it.

    An explicit ``Key: <note>`` line wins.  Otherwise the root of the first
    token on the first chord-like line is used.  Falls back to ``"C"``.
    """
    m = KEY_DECLARATION_RE.search(text)
    if m:
        root = m.group(1)
        return root[0].upper() + root[1:]

    for line in text.splitlines():
        if is_section_label(line) or not looks_like_chords(line):
            continue
        root = split_chord(line.split()[0]).root
        return root or DEFAULT_KEY
    return DEFAULT_KEY


# ---------------------------------------------------------------------------
# Section state machine
# ---------------------------------------------------------------------------


class _State(Enum):
    NO_OPEN_SECTION = auto()
    SECTION_OPEN = auto()


class _SectionBuilder:
    """Accumulates sections; the only mutable object in a parse."""

    def __init__(self) -> None:
        self.state = _State.NO_OPEN_SECTION
        self.sections: list[Section] = []
        self._label = ""
        self._lines: list[LineEntry] = []

    def open(self, label: str) -> None:
        self.flush()
        self.state = _State.SECTION_OPEN
        self._label = label
        self._lines = []

    def append(self, entry: LineEntry) -> None:
        if self.state is _State.NO_OPEN_SECTION:
            raise RuntimeError("append() with no open section")
        self._lines.append(entry)

    def flush(self) -> None:
        if self.state is _State.SECTION_OPEN:
            logger.debug("Section %r closed with %d line(s)", self._label, len(self._lines))
            self.sections.append(Section(label=self._label, lines=tuple(self._lines)))
        self.state = _State.NO_OPEN_SECTION
        self._label = ""
        self._lines = []


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def parse_song(text: str) -> ParsedSong:
    """Parse one song's raw text.

    Never raises on odd input: empty text gives a song with no sections and
    key ``"C"``.
    """
    key = detect_key(text)
    logger.debug("Song key: %s", key)

    lines = text.splitlines()
    builder = _SectionBuilder()

    i = 0
    while i < len(lines):
        line = lines[i].rstrip()
        next_line = lines[i + 1] if i + 1 < len(lines) else None
        lt = classify_line(line, next_line)

        if lt == LineType.BLANK:
            i += 1
            continue

        if lt == LineType.SECTION:
            builder.open(clean_section_label(line))
            i += 1
            continue

        if lt == LineType.CHORD and next_line is not None:
            if builder.state is _State.NO_OPEN_SECTION:
                builder.open("")
            builder.append(
                LineEntry(
                    lyric_line=next_line.rstrip(),
                    chord_line=line,
                    chords=extract_chords(line),
                )
            )
            i += 2
            continue

        # LineType.LYRIC, or a chord line on the last line of input
        if builder.state is _State.SECTION_OPEN:
            builder.append(LineEntry(lyric_line=line))
        i += 1

    builder.flush()
    return ParsedSong(sections=tuple(builder.sections), key=key)


def split_songs(text: str) -> list[str]:
    """Split *text* on separator lines (``---`` or longer) into song blocks.

    Blocks are stripped; empty blocks are discarded.
    """
    blocks = (block.strip() for block in SONG_SEPARATOR_RE.split(text))
    return [block for block in blocks if block]


def parse_songs(text: str) -> list[ParsedSong]:
    """Split *text* into songs and parse each one independently."""
    return [parse_song(block) for block in split_songs(text)]
