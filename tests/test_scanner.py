import pytest

from chordshape.models import ChordToken
from chordshape.scanner import (
    LineType,
    classify_line,
    clean_section_label,
    extract_chords,
    is_chord_candidate,
    is_chord_token,
    is_section_label,
    looks_like_chords,
)

# ---------------------------------------------------------------------------
# is_section_label
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "line",
    ["VERSE 1", "Verse 2", "chorus", "Pre-Chorus", "INSTRUMENTAL", "Tag", "ENDING", "  BRIDGE  "],
)
def test_section_keywords(line):
    assert is_section_label(line)


def test_section_any_brackets():
    assert is_section_label("[BRIDGE]")
    assert is_section_label("[Verse 1]")
    assert is_section_label("[whatever goes here]")
    assert is_section_label("[2]")


def test_section_short_all_caps():
    assert is_section_label("HOOK")
    assert is_section_label("SOLO 2")


def test_section_all_caps_too_long():
    assert not is_section_label("THIS LINE IS FAR TOO LONG TO BE A LABEL")


def test_section_rejects_lowercase():
    assert not is_section_label("Light of the world")
    assert not is_section_label("Key: D")


def test_section_rejects_chord_only_line():
    assert not is_section_label("D            A")
    assert not is_section_label("G     D     C")


def test_section_blank():
    assert not is_section_label("   ")


# ---------------------------------------------------------------------------
# clean_section_label
# ---------------------------------------------------------------------------


def test_clean_label_strips_brackets_and_uppercases():
    assert clean_section_label("[Bridge]") == "BRIDGE"
    assert clean_section_label("  Verse 1 ") == "VERSE 1"


def test_clean_label_bare_number_is_verse():
    assert clean_section_label("[2]") == "VERSE 2"


# ---------------------------------------------------------------------------
# chord candidates
# ---------------------------------------------------------------------------


def test_looks_like_chords():
    assert looks_like_chords("D            A")
    assert looks_like_chords("Bb  F")
    assert not looks_like_chords("Light of the world")
    assert not looks_like_chords("Em")


def test_chord_candidate_above_lyric():
    assert is_chord_candidate("D            A", "Light of the world")


def test_chord_candidate_last_line():
    assert is_chord_candidate("G  D  ", None)


def test_chord_candidate_rejected_when_next_line_is_chord_like():
    assert not is_chord_candidate("G  D", "Em  C  D")


def test_is_chord_token():
    assert is_chord_token("Am7")
    assert is_chord_token("F#sus4")
    assert is_chord_token("C/G")
    assert not is_chord_token("VERSE")
    assert not is_chord_token("Hm")


# ---------------------------------------------------------------------------
# classify_line
# ---------------------------------------------------------------------------


def test_classify_blank():
    assert classify_line("") == LineType.BLANK
    assert classify_line("    ", "D  A") == LineType.BLANK


def test_classify_label_before_chord():
    assert classify_line("[G D]", "Lyrics") == LineType.SECTION


def test_classify_chord():
    assert classify_line("G          D", "Here I am to worship") == LineType.CHORD


def test_classify_lyric():
    assert classify_line("Here I am to worship", "G  D") == LineType.LYRIC


def test_classify_stacked_chord_lines():
    assert classify_line("G  D", "Em  C  D") == LineType.LYRIC
    assert classify_line("Em  C  D", "Altogether lovely") == LineType.CHORD


def test_classify_trailing_single_chord_is_lyric():
    # Needs a root followed by whitespace; a lone "Em" never qualifies
    assert classify_line("             Em", "You stepped down") == LineType.LYRIC


# ---------------------------------------------------------------------------
# extract_chords
# ---------------------------------------------------------------------------


def test_extract_positions():
    assert extract_chords("D            A") == (
        ChordToken(chord="D", column=0, length=1),
        ChordToken(chord="A", column=13, length=1),
    )


def test_extract_keeps_leading_whitespace_columns():
    tokens = extract_chords("     Em")
    assert tokens == (ChordToken(chord="Em", column=5, length=2),)


def test_extract_qualities_and_slash():
    tokens = extract_chords("Cmaj7  Dsus4  G/B  F#m7  Bbdim")
    assert [t.chord for t in tokens] == ["Cmaj7", "Dsus4", "G/B", "F#m7", "Bbdim"]
    assert [t.column for t in tokens] == [0, 7, 14, 19, 25]
    assert [t.length for t in tokens] == [5, 5, 3, 4, 5]


def test_extract_sorted_left_to_right():
    columns = [t.column for t in extract_chords("G     D     Em    A")]
    assert columns == sorted(columns)


def test_extract_empty_line():
    assert extract_chords("    ") == ()
