class StructuralError(ValueError):
    """
    Raised when a CSV document as a whole cannot be interpreted: empty input,
    no header row, or a header missing one of the required columns.
    Individual bad rows never raise this; they are skipped.
    """
