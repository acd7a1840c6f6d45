"""Message envelopes for card documents.

Thin layer over Bot Framework's ``CardFactory`` and ``MessageFactory`` (the
``teams`` extra). Sending the resulting activities is the caller's business.
"""

from typing import Any, Iterable, Optional, Union

from botbuilder.core import CardFactory, MessageFactory
from botbuilder.schema import Activity, Attachment

from teamscards.models import AdaptiveCard

CardInput = Union[AdaptiveCard, dict[str, Any]]


def _as_dict(card: CardInput) -> dict[str, Any]:
    if isinstance(card, AdaptiveCard):
        return card.to_dict()
    return card


def card_attachment(card: CardInput) -> Attachment:
    """Wrap a card document in an Adaptive Card attachment."""
    return CardFactory.adaptive_card(_as_dict(card))


def card_message(card: CardInput, text: Optional[str] = None) -> Activity:
    """Message activity carrying a single card."""
    return MessageFactory.attachment(card_attachment(card), text=text)


def carousel_message(cards: Iterable[CardInput], text: Optional[str] = None) -> Activity:
    """Message activity showing several cards as a carousel."""
    return MessageFactory.carousel([card_attachment(card) for card in cards], text=text)


def text_message(text: str) -> Activity:
    """Plain-text message activity."""
    return MessageFactory.text(text)
