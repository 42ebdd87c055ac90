"""Rebuild a chord line as column-true segments after transforming its chords.

Each chord keeps the column it had on the original chord line.  When a
transform changes a chord's width (``C#`` → ``C``) the gap before the next
chord grows or shrinks; a chord that grows into its neighbour's column is
simply laid over it, nothing is re-flowed.

Example::

    tokens     = extract_chords("D            A")
    formatted  = format_chord_line(tokens, "Light of the world", str.lower)
    formatted.chord_line  # "d            a    "
"""

from collections.abc import Callable, Iterable

from .models import ChordToken, FormattedLine, PositionedSegment, SegmentKind


def _space(width: int) -> PositionedSegment:
    return PositionedSegment(kind=SegmentKind.SPACE, text=" " * width, length=width)


def format_chord_line(
    chords: Iterable[ChordToken],
    lyric_line: str,
    transform: Callable[[str], str] | None = None,
) -> FormattedLine:
    """Lay out *chords* (after *transform*) over *lyric_line*.

    Returns one CHORD segment per token, in column order, with SPACE
    segments filling the gaps and padding the line out to the lyric's width.
    """
    transformed: list[ChordToken] = []
    for token in chords:
        text = transform(token.chord) if transform else token.chord
        transformed.append(ChordToken(chord=text, column=token.column, length=len(text)))
    # Transposing changes spelling, never position
    transformed.sort(key=lambda token: token.column)

    segments: list[PositionedSegment] = []
    cursor = 0
    for token in transformed:
        if token.column > cursor:
            segments.append(_space(token.column - cursor))
            cursor = token.column
        segments.append(
            PositionedSegment(kind=SegmentKind.CHORD, text=token.chord, length=token.length)
        )
        cursor += token.length

    if cursor < len(lyric_line):
        segments.append(_space(len(lyric_line) - cursor))

    return FormattedLine(segments=tuple(segments), lyric_line=lyric_line)
