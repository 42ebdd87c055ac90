class ChordShapeError(Exception):
    """Base exception for chordshape."""


class UnknownNoteError(ChordShapeError):
    """Raised in strict mode when a note spelling is not in the chromatic alphabet."""

    def __init__(self, spelling: str):
        self.spelling = spelling
        super().__init__(f"Unknown note: {spelling!r}")


class InvalidChordError(ChordShapeError):
    """Raised in strict mode when a chord has no recognisable root."""

    def __init__(self, chord: str, reason: str):
        self.chord = chord
        self.reason = reason
        super().__init__(f"Invalid chord {chord!r}: {reason}")
