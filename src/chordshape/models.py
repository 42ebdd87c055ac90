from dataclasses import dataclass
from enum import Enum, auto

from .chords import split_chord


@dataclass(frozen=True)
class ChordToken:
    """A chord found on a chord line, with its column and width on that line.

    Example: in ``"D            A"`` the second token is
    ``ChordToken(chord="A", column=13, length=1)``.
    """

    chord: str
    column: int
    length: int

    @property
    def root(self) -> str:
        """Root spelling exactly as written, e.g. ``"Bb"`` (never normalised)."""
        return split_chord(self.chord).root

    @property
    def suffix(self) -> str:
        """Everything after the root: quality, extension and any ``/bass``."""
        return split_chord(self.chord).suffix


@dataclass(frozen=True)
class LineEntry:
    """A lyric line, optionally paired with the chord line printed above it.

    Lyric-only lines have an empty ``chord_line`` and no ``chords``.
    """

    lyric_line: str
    chord_line: str = ""
    chords: tuple[ChordToken, ...] = ()

    @property
    def has_chords(self) -> bool:
        return bool(self.chord_line)


@dataclass(frozen=True)
class Section:
    """A labelled section of a song (verse, chorus, bridge, etc.)."""

    label: str = ""  # e.g. "VERSE 1", "" for the implicit leading section
    lines: tuple[LineEntry, ...] = ()


@dataclass(frozen=True)
class ParsedSong:
    """Sections of one song plus its declared or inferred key."""

    sections: tuple[Section, ...] = ()
    key: str = "C"


class SegmentKind(Enum):
    SPACE = auto()
    CHORD = auto()


@dataclass(frozen=True)
class PositionedSegment:
    """One run of chord-line text; ``length`` is its width in columns."""

    kind: SegmentKind
    text: str
    length: int


@dataclass(frozen=True)
class FormattedLine:
    """A rebuilt chord line (as segments) together with the lyric under it."""

    segments: tuple[PositionedSegment, ...]
    lyric_line: str

    @property
    def chord_line(self) -> str:
        return "".join(segment.text for segment in self.segments)

    @property
    def chords(self) -> list[str]:
        return [s.text for s in self.segments if s.kind is SegmentKind.CHORD]
