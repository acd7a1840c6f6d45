"""Action (button) records."""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import Field

from .base import ActionStyle, CardModel


class CardAction(CardModel):
    """Fields shared by every action."""

    title: Any = None
    icon_url: Any = None
    id: Any = None
    tooltip: Any = Field(None, description="Hover text, v1.5 and later")
    style: ActionStyle = Field(default=ActionStyle.DEFAULT)
    is_enabled: bool = Field(default=True, description="v1.5 and later")


class OpenUrlAction(CardAction):
    """Opens a URL."""

    type: Literal["Action.OpenUrl"] = "Action.OpenUrl"
    url: Any = None


class SubmitAction(CardAction):
    """Gathers input fields and sends them, merged with ``data``, to the bot."""

    type: Literal["Action.Submit"] = "Action.Submit"
    data: Any = None


class ShowCardAction(CardAction):
    """Reveals a nested card.

    Inputs inside the nested card are not submitted by a submit button on the
    parent card.
    """

    type: Literal["Action.ShowCard"] = "Action.ShowCard"
    card: Optional["CardLike"] = None


class TargetElement(CardModel):
    """Explicit visibility target for ToggleVisibility."""

    element_id: Any = None
    is_visible: Optional[bool] = None


TargetElementLike = Annotated[
    Union[str, dict[str, Any], TargetElement], Field(union_mode="left_to_right")
]


class ToggleVisibilityAction(CardAction):
    """Toggles the visibility of the targeted elements."""

    type: Literal["Action.ToggleVisibility"] = "Action.ToggleVisibility"
    target_elements: list[TargetElementLike] = Field(default_factory=list)
