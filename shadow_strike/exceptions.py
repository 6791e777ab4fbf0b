class ShadowStrikeError(Exception):
    """Base class for errors raised by the game's collaborators."""


class SuggestionUnavailable(ShadowStrikeError):
    """Raised by a suggestion service that cannot produce difficulty values."""
