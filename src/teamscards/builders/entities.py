"""Mention entity builders.

A mention only renders when its ``<at>Name</at>`` text also appears in a
TextBlock of the same card, either through :meth:`Entities.tagify` or through
an ``@<Name>`` placeholder rewritten by the text normalizer.
"""

from typing import Any

from teamscards.models import Mention, MentionedUser


class Entities:
    """Builds mention entities."""

    def mention(self, display_name: str, user_id: str) -> dict[str, Any]:
        """Mention entity for a user."""
        return Mention(
            text=self.tagify(display_name),
            mentioned=MentionedUser(id=user_id, name=display_name),
        ).to_dict()

    def tagify(self, display_name: str) -> str:
        """Wrap a name in mention markup: ``Jane`` -> ``<at>Jane</at>``."""
        return f"<at>{display_name}</at>"
