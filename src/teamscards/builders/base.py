"""Shared plumbing for builder groups."""

from typing import Optional

from teamscards.text import TextNormalizer, default_normalizer


class BuilderGroup:
    """Base for a group of builders sharing a text normalizer.

    Builders take keyword configuration (snake_case or the schema's camelCase
    keys), apply defaults through the record models and return plain records.
    """

    def __init__(self, normalizer: Optional[TextNormalizer] = None):
        """Initialize the group.

        Args:
            normalizer: Text normalizer applied to display strings. Defaults to
                the process-wide normalizer.
        """
        self.normalizer = normalizer or default_normalizer

    def normalize(self, text: Optional[str]) -> Optional[str]:
        """Normalize display text with this group's normalizer."""
        return self.normalizer.normalize(text)
