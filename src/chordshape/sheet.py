"""Plain-text chord sheets in a reference shape key.

Renders a :class:`~chordshape.models.ParsedSong` as the sheet a guitarist
reads when playing the song with a capo and the chord shapes of another key::

    C-Shape Version
    Capo: 2

    VERSE 1
    C            G
    Light of the world

Chord lines are always built from :func:`~chordshape.formatter.format_chord_line`
segments; this module never works out columns itself.

Usage::

    from chordshape.sheet import ChordSheetFormatter
    text = ChordSheetFormatter("G").render(song)
"""

from .chords import capo_fret, shape_transform
from .formatter import format_chord_line
from .models import LineEntry, ParsedSong, Section

DEFAULT_SHAPE_KEYS = ("C", "G")


class ChordSheetFormatter:
    """Render a :class:`~chordshape.models.ParsedSong` in one shape key."""

    def __init__(self, shape_key: str, strict: bool = False):
        self.shape_key = shape_key
        self.strict = strict

    def title(self) -> str:
        return f"{self.shape_key}-Shape Version"

    def render(self, song: ParsedSong, key: str | None = None) -> str:
        """Return the sheet text for *song*.

        *key* overrides the song's detected key.  The returned string ends
        with a single newline and has no trailing whitespace on any line.
        """
        song_key = key or song.key
        parts: list[str] = [
            self.title(),
            f"Capo: {capo_fret(song_key, self.shape_key)}",
        ]

        for section in song.sections:
            parts.append("")  # blank line before every section
            parts.extend(self._render_section(section, song_key))

        return "\n".join(part.rstrip() for part in parts) + "\n"

    # -----------------------------------------------------------------------
    # Internal helpers
    # -----------------------------------------------------------------------

    def _render_section(self, section: Section, song_key: str) -> list[str]:
        lines = [section.label] if section.label else []
        for entry in section.lines:
            lines.extend(self._render_entry(entry, song_key))
        return lines

    def _render_entry(self, entry: LineEntry, song_key: str) -> list[str]:
        if not entry.has_chords:
            return [entry.lyric_line]
        formatted = format_chord_line(
            entry.chords,
            entry.lyric_line,
            shape_transform(song_key, self.shape_key, strict=self.strict),
        )
        return [formatted.chord_line, formatted.lyric_line]
