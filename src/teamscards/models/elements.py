"""Display elements: text and images."""

from typing import Any, Literal, Optional

from pydantic import Field

from .base import (
    CardElement,
    FontType,
    HorizontalAlignment,
    ImageSize,
    ImageStyle,
    TextBlockStyle,
    TextColor,
    TextSize,
    TextWeight,
)


class TextBlock(CardElement):
    """Displays text, with control over size, weight and color."""

    type: Literal["TextBlock"] = "TextBlock"
    text: Any = None
    color: Optional[TextColor] = None
    font_type: Optional[FontType] = None
    horizontal_alignment: HorizontalAlignment = Field(default=HorizontalAlignment.LEFT)
    is_subtle: bool = Field(default=False)
    max_lines: Any = None
    size: Optional[TextSize] = None
    weight: Optional[TextWeight] = None
    wrap: bool = Field(default=True)
    style: TextBlockStyle = Field(default=TextBlockStyle.DEFAULT)


class Image(CardElement):
    """Displays a PNG, JPEG or GIF image."""

    type: Literal["Image"] = "Image"
    url: Any = None
    alt_text: Any = None
    background_color: Any = Field(None, description="Hex color behind transparent images")
    # auto / stretch, or a pixel string like "50px"
    height: Any = None
    horizontal_alignment: HorizontalAlignment = Field(default=HorizontalAlignment.LEFT)
    select_action: Optional["ActionLike"] = None
    size: Optional[ImageSize] = None
    style: ImageStyle = Field(default=ImageStyle.DEFAULT)
    width: Any = None
