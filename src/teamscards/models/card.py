"""Top-level card document and the node/action tagged unions.

The unions live here because they close the recursion between nodes, actions
and cards (a ShowCard action nests a whole card). Every model with a forward
reference is rebuilt once all names exist.
"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import Field

from teamscards.config import settings

from .actions import (
    CardAction,
    OpenUrlAction,
    ShowCardAction,
    SubmitAction,
    TargetElement,
    ToggleVisibilityAction,
)
from .base import BackgroundImageLike, CardModel, VerticalAlignment
from .containers import (
    ActionSet,
    Column,
    ColumnSet,
    Container,
    FactSet,
    ImageSet,
    Table,
    TableCell,
    TableRow,
)
from .elements import Image, TextBlock
from .entity import Mention
from .inputs import (
    InputChoiceSet,
    InputDate,
    InputField,
    InputNumber,
    InputText,
    InputTime,
    InputToggle,
)

Node = Annotated[
    Union[
        TextBlock,
        Image,
        Container,
        ColumnSet,
        Column,
        FactSet,
        ImageSet,
        Table,
        TableCell,
        ActionSet,
        InputText,
        InputNumber,
        InputDate,
        InputTime,
        InputToggle,
        InputChoiceSet,
    ],
    Field(discriminator="type"),
]

Action = Annotated[
    Union[OpenUrlAction, SubmitAction, ShowCardAction, ToggleVisibilityAction],
    Field(discriminator="type"),
]

# Plain records pass through untouched; model instances use the tagged union.
NodeLike = Annotated[Union[dict[str, Any], Node], Field(union_mode="left_to_right")]
ActionLike = Annotated[Union[dict[str, Any], Action], Field(union_mode="left_to_right")]
MentionLike = Annotated[Union[dict[str, Any], Mention], Field(union_mode="left_to_right")]


class TeamsMetadata(CardModel):
    """The ``msteams`` vendor block of a card."""

    width: Any = None
    entities: Optional[list[MentionLike]] = None


class AdaptiveCard(CardModel):
    """Top-level card document."""

    type: Literal["AdaptiveCard"] = "AdaptiveCard"
    schema_: str = Field(default_factory=lambda: settings.card_schema, alias="$schema")
    version: str = Field(default_factory=lambda: settings.card_version)
    msteams: Optional[TeamsMetadata] = None
    body: Optional[list[NodeLike]] = None
    actions: Optional[list[ActionLike]] = None
    min_height: Any = None
    vertical_content_alignment: Optional[VerticalAlignment] = None
    fallback_text: Any = None
    background_image: Optional[BackgroundImageLike] = None
    lang: Any = None
    refresh: Optional[dict[str, Any]] = None
    authentication: Optional[dict[str, Any]] = None
    rtl: Optional[bool] = None


CardLike = Annotated[Union[dict[str, Any], AdaptiveCard], Field(union_mode="left_to_right")]


for _model in (
    TextBlock,
    Image,
    Container,
    Column,
    ColumnSet,
    FactSet,
    ImageSet,
    TableCell,
    TableRow,
    Table,
    ActionSet,
    InputField,
    InputText,
    InputNumber,
    InputDate,
    InputTime,
    InputToggle,
    InputChoiceSet,
    CardAction,
    OpenUrlAction,
    SubmitAction,
    ShowCardAction,
    TargetElement,
    ToggleVisibilityAction,
    TeamsMetadata,
    AdaptiveCard,
):
    _model.model_rebuild()
