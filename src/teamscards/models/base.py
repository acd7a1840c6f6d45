"""Base models and shared enumerations for card records."""

from enum import Enum
from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class Spacing(str, Enum):
    """Spacing above an element."""

    DEFAULT = "default"
    NONE = "none"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EXTRA_LARGE = "extraLarge"
    XL = "extraLarge"
    PADDING = "padding"


class HorizontalAlignment(str, Enum):
    """Horizontal alignment of an element or its content."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalAlignment(str, Enum):
    """Vertical alignment of an element or its content."""

    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


class BlockHeight(str, Enum):
    """Height of an element inside its container."""

    AUTO = "auto"
    STRETCH = "stretch"


class Width(str, Enum):
    """Keyword widths for columns and images."""

    AUTO = "auto"
    STRETCH = "stretch"


class ContainerStyle(str, Enum):
    """Style hint for containers, columns and table cells."""

    DEFAULT = "default"
    EMPHASIS = "emphasis"
    GOOD = "good"
    ATTENTION = "attention"
    WARNING = "warning"
    ACCENT = "accent"

    # Colour aliases
    GREY = "emphasis"
    GREEN = "good"
    RED = "attention"
    YELLOW = "warning"
    BLUE = "accent"


class TextColor(str, Enum):
    """Text colors."""

    DEFAULT = "default"
    DARK = "dark"
    LIGHT = "light"
    ACCENT = "accent"
    GOOD = "good"
    WARNING = "warning"
    ATTENTION = "attention"

    # Colour aliases
    BLACK = "dark"
    GREY = "light"
    BLUE = "accent"
    GREEN = "good"
    YELLOW = "warning"
    RED = "attention"


class TextSize(str, Enum):
    """Text sizes."""

    DEFAULT = "default"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EXTRA_LARGE = "extraLarge"
    XL = "extraLarge"


class TextWeight(str, Enum):
    """Text weights."""

    DEFAULT = "default"
    LIGHTER = "lighter"
    BOLDER = "bolder"


class FontType(str, Enum):
    """Font families."""

    DEFAULT = "default"
    MONOSPACE = "monospace"


class TextBlockStyle(str, Enum):
    """Semantic style of a TextBlock."""

    DEFAULT = "default"
    HEADING = "heading"


class ImageSize(str, Enum):
    """Image sizes."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    STRETCH = "stretch"
    AUTO = "auto"


class ImageStyle(str, Enum):
    """Image styles. ``person`` crops the image to a circle."""

    DEFAULT = "default"
    PERSON = "person"
    ROUNDED = "person"


class ActionStyle(str, Enum):
    """Rendered action styles."""

    DEFAULT = "default"
    POSITIVE = "positive"
    DESTRUCTIVE = "destructive"


class ChoiceInputStyle(str, Enum):
    """ChoiceSet presentation. ``expanded`` renders radio buttons/checkboxes."""

    COMPACT = "compact"
    EXPANDED = "expanded"
    FILTERED = "filtered"
    RADIO = "expanded"


class TextInputStyle(str, Enum):
    """Keyboard hint for text inputs."""

    TEXT = "text"
    TEL = "tel"
    URL = "url"
    EMAIL = "email"
    PASSWORD = "password"


class BackgroundImageFillMode(str, Enum):
    """How a background image fills its container."""

    REPEAT_HORIZONTALLY = "repeatHorizontally"
    REPEAT_VERTICALLY = "repeatVertically"
    REPEAT = "repeat"
    COVER = "cover"


class CardModel(BaseModel):
    """Base class for every card record.

    Attributes are snake_case in Python and camelCase on the wire. Records are
    immutable once built.
    """

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True
        extra = "forbid"

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-serializable record. Unset optional fields are omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class CardElement(CardModel):
    """Fields shared by every node that can sit in a card body."""

    height: Optional[BlockHeight] = None
    separator: bool = Field(default=False, description="Draw a separator above")
    spacing: Optional[Spacing] = None
    id: Any = None
    is_visible: bool = Field(default=True)


class BackgroundImage(CardModel):
    """Background image for cards, containers, columns and table cells."""

    url: Any = None
    fill_mode: Optional[BackgroundImageFillMode] = None
    horizontal_alignment: HorizontalAlignment = Field(default=HorizontalAlignment.CENTER)
    vertical_alignment: VerticalAlignment = Field(default=VerticalAlignment.CENTER)


# A URL, a plain record, or a BackgroundImage model.
BackgroundImageLike = Annotated[
    Union[str, dict[str, Any], BackgroundImage], Field(union_mode="left_to_right")
]
