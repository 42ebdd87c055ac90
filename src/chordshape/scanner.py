"""Line classification and chord extraction for chord-over-lyric text.

Each line category has its own predicate so the rules can be tested in
isolation.  :func:`classify_line` applies them in a fixed order:

  1. BLANK    — empty or whitespace only
  2. SECTION  — ``VERSE 2``, ``[Bridge]``, ``CHORUS``
  3. CHORD    — a chord line whose next line is not also chord-like
  4. LYRIC    — everything else

Example::

    D            A            <- CHORD  (D at column 0, A at column 13)
    Light of the world        <- LYRIC
"""

import re
from enum import Enum, auto

from .models import ChordToken

# ---------------------------------------------------------------------------
# Regexes
# ---------------------------------------------------------------------------

SECTION_NAMES = (
    "VERSE",
    "CHORUS",
    "BRIDGE",
    "INTRO",
    "OUTRO",
    "PRE-CHORUS",
    "INTERLUDE",
    "INSTRUMENTAL",
    "TAG",
    "ENDING",
)

# Known section names, optionally numbered: "Verse 2", "CHORUS", "tag"
SECTION_KEYWORDS_RE = re.compile(
    r"^(?:" + "|".join(re.escape(name) for name in SECTION_NAMES) + r")\s*\d*$",
    re.IGNORECASE,
)

# Shouted labels: "HOOK", "SOLO 2".  Must not contain lowercase letters.
UPPERCASE_LABEL_RE = re.compile(r"^[A-Z\s]+\d*$")
UPPERCASE_LABEL_MAX_LEN = 30

# A root followed by whitespace somewhere in the line
CHORD_HINT_RE = re.compile(r"[A-G][b#]?\s")

# One chord token: root, accidental, quality, extension digits, slash bass
CHORD_TOKEN_RE = re.compile(r"[A-G][b#]?(?:maj|min|m|sus|add|dim|aug)?\d*(?:/[A-G][b#]?)?")


# ---------------------------------------------------------------------------
# LineType
# ---------------------------------------------------------------------------


class LineType(Enum):
    BLANK = auto()
    SECTION = auto()
    CHORD = auto()
    LYRIC = auto()


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def is_blank(line: str) -> bool:
    return not line.strip()


def is_chord_token(text: str) -> bool:
    """Return True if the whole of *text* is a single chord token."""
    return CHORD_TOKEN_RE.fullmatch(text) is not None


def is_section_label(line: str) -> bool:
    """Return True if *line* names a song section.

    Accepted forms: a known section name with an optional number (any case),
    anything in square brackets, or a short all-caps line.  An all-caps line
    made only of chord tokens (``G   D   C``) is a chord line, not a label.
    """
    stripped = line.strip()
    if not stripped:
        return False
    if SECTION_KEYWORDS_RE.match(stripped):
        return True
    if stripped.startswith("[") and stripped.endswith("]"):
        return True
    if len(stripped) < UPPERCASE_LABEL_MAX_LEN and UPPERCASE_LABEL_RE.match(stripped):
        return not all(is_chord_token(token) for token in stripped.split())
    return False


def clean_section_label(line: str) -> str:
    """Return the stored form of a section label line.

    ``"[Chorus]"`` → ``"CHORUS"``; a bare number such as ``"[2]"`` is read as
    a verse number → ``"VERSE 2"``.
    """
    label = line.replace("[", "").replace("]", "").strip()
    if label[:1].isdigit():
        label = f"Verse {label}"
    return label.upper()


def looks_like_chords(line: str) -> bool:
    return CHORD_HINT_RE.search(line) is not None


def is_chord_candidate(line: str, next_line: str | None) -> bool:
    """Return True if *line* is the chord half of a chord/lyric pair.

    A chord-like line directly above another chord-like line is not a
    candidate: only the line sitting on top of a lyric counts.
    """
    if not looks_like_chords(line):
        return False
    return next_line is None or not looks_like_chords(next_line)


def classify_line(line: str, next_line: str | None = None) -> LineType:
    """Classify *line*, using *next_line* (``None`` at end of input) as lookahead."""
    if is_blank(line):
        return LineType.BLANK
    if is_section_label(line):
        return LineType.SECTION
    if is_chord_candidate(line, next_line):
        return LineType.CHORD
    return LineType.LYRIC


# ---------------------------------------------------------------------------
# Chord extraction
# ---------------------------------------------------------------------------


def extract_chords(line: str) -> tuple[ChordToken, ...]:
    """Return every chord token on *line* with its column and width.

    Columns are offsets into *line* exactly as given, so leading whitespace
    counts.  Tokens come back sorted left to right.
    """
    tokens = [
        ChordToken(chord=m.group(), column=m.start(), length=len(m.group()))
        for m in CHORD_TOKEN_RE.finditer(line)
    ]
    return tuple(sorted(tokens, key=lambda token: token.column))
