"""Exceptions raised while building cards."""

from typing import Iterable


class CardConfigurationError(ValueError):
    """Raised when a builder receives a configuration key it cannot map.

    Builders are defaulting functions, not validators, so this is reserved for
    lookups that would otherwise emit a malformed document (e.g. an unknown
    action style key).
    """

    def __init__(self, field: str, key: object, allowed: Iterable[str]) -> None:
        self.field = field
        self.key = key
        self.allowed = tuple(allowed)
        super().__init__(
            f"Unknown {field} {key!r}; expected one of: {', '.join(self.allowed)}"
        )
