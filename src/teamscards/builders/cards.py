"""Document assembler: the top-level AdaptiveCard."""

import logging
from typing import Any, Optional

from teamscards.config import settings
from teamscards.models import AdaptiveCard, TeamsMetadata

from .base import BuilderGroup

logger = logging.getLogger(__name__)


def build_metadata(is_full_width: bool, entities: Optional[list]) -> Optional[TeamsMetadata]:
    """Build the ``msteams`` block, or None when there is nothing to say.

    Only the keys that apply are included: ``width`` for full-width cards and
    ``entities`` for a non-empty entity list.
    """
    metadata: dict[str, Any] = {}
    if is_full_width:
        metadata["width"] = "full"
    if entities:
        metadata["entities"] = entities
    if not metadata:
        return None
    return TeamsMetadata(**metadata)


class Cards(BuilderGroup):
    """Assembles card documents.

    The result is a plain record; wrapping it into a message envelope is the
    job of :mod:`teamscards.envelope`.
    """

    def adaptive_card(
        self,
        body: Optional[list] = None,
        actions: Optional[list] = None,
        is_full_width: Optional[bool] = None,
        entities: Optional[list] = None,
        **config: Any,
    ) -> dict[str, Any]:
        """Build a card document.

        Args:
            body: Nodes shown in the card body.
            actions: Actions shown in the action bar.
            is_full_width: Stretch the card to the full conversation width.
                Defaults to ``settings.full_width``.
            entities: Mention entities referenced from TextBlocks.
            **config: schema_ / $schema, version ("1.3"), min_height,
                vertical_content_alignment, fallback_text, background_image,
                lang, refresh, authentication, rtl.

        Returns:
            AdaptiveCard record.
        """
        if is_full_width is None:
            is_full_width = settings.full_width
        card = AdaptiveCard(
            body=body,
            actions=actions,
            msteams=build_metadata(is_full_width, entities),
            **config,
        )
        logger.debug(
            "Assembled AdaptiveCard v%s with %d body node(s) and %d action(s)",
            card.version,
            len(body or ()),
            len(actions or ()),
        )
        return card.to_dict()

    build_document = adaptive_card
