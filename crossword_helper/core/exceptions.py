"""Custom exception hierarchy for crossword layout generation."""


class CrosswordError(Exception):
    """Base exception for crossword helper failures."""


class InvalidDimensionsError(CrosswordError):
    """Raised when a grid is requested with a non-positive width or height."""


class InvalidWordError(CrosswordError):
    """Raised when a word list contains unusable entries."""


class PlacementError(CrosswordError):
    """Raised when placements cannot be replayed onto a grid."""


class ValidationError(CrosswordError):
    """Raised when a finished layout fails the integrity checks."""


class GridEditError(CrosswordError):
    """Raised when a manual cell edit is out of bounds or not a letter."""


class LayoutLoadError(CrosswordError):
    """Raised when a saved layout document is malformed."""


class SuggestionLookupError(CrosswordError):
    """Raised when the word suggestion service cannot be reached."""
