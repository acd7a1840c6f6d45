"""Card record models for the Teams card builder.

This module defines the Pydantic models for every record the builders emit.
Models are immutable, snake_case in Python and camelCase on the wire; call
``to_dict()`` for the plain JSON-serializable record.

Model Hierarchy:
- AdaptiveCard → body (Nodes) + actions (Actions) + msteams metadata
- Container / Column / TableCell → items (Nodes)
- ColumnSet → Columns; Table → TableRows → TableCells
- ShowCardAction → nested AdaptiveCard
"""

from .base import (
    ActionStyle,
    BackgroundImage,
    BackgroundImageLike,
    BackgroundImageFillMode,
    BlockHeight,
    CardElement,
    CardModel,
    ChoiceInputStyle,
    ContainerStyle,
    FontType,
    HorizontalAlignment,
    ImageSize,
    ImageStyle,
    Spacing,
    TextBlockStyle,
    TextColor,
    TextInputStyle,
    TextSize,
    TextWeight,
    VerticalAlignment,
    Width,
)
from .elements import Image, TextBlock
from .containers import (
    ActionSet,
    Column,
    ColumnSet,
    Container,
    Fact,
    FactSet,
    ImageSet,
    Table,
    TableCell,
    TableColumnDefinition,
    TableRow,
)
from .inputs import (
    Choice,
    InputChoiceSet,
    InputDate,
    InputField,
    InputNumber,
    InputText,
    InputTime,
    InputToggle,
)
from .actions import (
    CardAction,
    OpenUrlAction,
    ShowCardAction,
    SubmitAction,
    TargetElement,
    ToggleVisibilityAction,
)
from .entity import Mention, MentionedUser
from .card import (
    Action,
    ActionLike,
    AdaptiveCard,
    CardLike,
    Node,
    NodeLike,
    TeamsMetadata,
)

__all__ = [
    # Enumerations
    "ActionStyle",
    "BackgroundImageFillMode",
    "BlockHeight",
    "ChoiceInputStyle",
    "ContainerStyle",
    "FontType",
    "HorizontalAlignment",
    "ImageSize",
    "ImageStyle",
    "Spacing",
    "TextBlockStyle",
    "TextColor",
    "TextInputStyle",
    "TextSize",
    "TextWeight",
    "VerticalAlignment",
    "Width",
    # Base
    "BackgroundImage",
    "BackgroundImageLike",
    "CardElement",
    "CardModel",
    # Elements
    "Image",
    "TextBlock",
    # Containers
    "ActionSet",
    "Column",
    "ColumnSet",
    "Container",
    "Fact",
    "FactSet",
    "ImageSet",
    "Table",
    "TableCell",
    "TableColumnDefinition",
    "TableRow",
    # Inputs
    "Choice",
    "InputChoiceSet",
    "InputDate",
    "InputField",
    "InputNumber",
    "InputText",
    "InputTime",
    "InputToggle",
    # Actions
    "CardAction",
    "OpenUrlAction",
    "ShowCardAction",
    "SubmitAction",
    "TargetElement",
    "ToggleVisibilityAction",
    # Entities
    "Mention",
    "MentionedUser",
    # Card
    "Action",
    "ActionLike",
    "AdaptiveCard",
    "CardLike",
    "Node",
    "NodeLike",
    "TeamsMetadata",
]
