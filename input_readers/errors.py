from __future__ import annotations


class UnreadableFileError(ValueError):
    """Raised when a payload cannot be turned into a row matrix at all."""
    pass
