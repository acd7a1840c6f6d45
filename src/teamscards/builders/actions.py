"""Action builders: buttons.

Callers pick a style by key; keys map onto the rendered style names. An
unknown key is a configuration error and fails the build.
"""

import logging
from typing import Any, Optional, Type

from teamscards.exceptions import CardConfigurationError
from teamscards.models import (
    ActionStyle,
    CardAction,
    OpenUrlAction,
    ShowCardAction,
    SubmitAction,
    ToggleVisibilityAction,
)

from .base import BuilderGroup

logger = logging.getLogger(__name__)

ACTION_STYLES = {
    "default": ActionStyle.DEFAULT,
    "primary": ActionStyle.POSITIVE,
    "danger": ActionStyle.DESTRUCTIVE,
}


def resolve_action_style(style: str) -> ActionStyle:
    """Map a style key (default, primary, danger) to its rendered style."""
    try:
        return ACTION_STYLES[style]
    except (KeyError, TypeError):
        logger.warning("Rejected action style %r", style)
        raise CardConfigurationError("action style", style, ACTION_STYLES) from None


class Actions(BuilderGroup):
    """Builds interactive button descriptors.

    Every action accepts icon_url, id, tooltip (v1.5+), style ("default",
    "primary" or "danger") and is_enabled (True, v1.5+). Titles are normalized.
    """

    def _build(
        self,
        model: Type[CardAction],
        title: Optional[str],
        style: str,
        **config: Any,
    ) -> dict[str, Any]:
        return model(
            title=self.normalize(title),
            style=resolve_action_style(style),
            **config,
        ).to_dict()

    def open_url(
        self,
        url: Optional[str] = None,
        title: Optional[str] = None,
        style: str = "default",
        **config: Any,
    ) -> dict[str, Any]:
        """Button that opens ``url``."""
        return self._build(OpenUrlAction, title, style, url=url, **config)

    def submit(
        self,
        title: Optional[str] = None,
        data: Any = None,
        style: str = "default",
        **config: Any,
    ) -> dict[str, Any]:
        """Button that submits the card inputs merged with ``data``."""
        return self._build(SubmitAction, title, style, data=data, **config)

    def show_card(
        self,
        title: Optional[str] = None,
        card: Any = None,
        style: str = "default",
        **config: Any,
    ) -> dict[str, Any]:
        """Button that reveals ``card``.

        Inputs inside ``card`` are not submitted by a submit button located on
        the parent card.
        """
        return self._build(ShowCardAction, title, style, card=card, **config)

    def toggle_visibility(
        self,
        title: Optional[str] = None,
        target_elements: Optional[list] = None,
        style: str = "default",
        **config: Any,
    ) -> dict[str, Any]:
        """Button that toggles visibility of elements.

        ``target_elements`` holds element ids or ``{elementId, isVisible}``
        records and defaults to an empty list.
        """
        return self._build(
            ToggleVisibilityAction,
            title,
            style,
            target_elements=target_elements if target_elements is not None else [],
            **config,
        )
