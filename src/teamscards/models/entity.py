"""Mention entities."""

from typing import Any, Literal

from .base import CardModel


class MentionedUser(CardModel):
    """The user a mention points at."""

    id: Any = None
    name: Any = None


class Mention(CardModel):
    """An at-mention.

    The renderer only resolves it when ``text`` also appears inside some
    TextBlock of the same card.
    """

    type: Literal["mention"] = "mention"
    text: str
    mentioned: MentionedUser
