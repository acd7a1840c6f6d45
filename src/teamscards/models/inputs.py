"""Form input nodes.

Every input carries the same validation fields. ``error_message`` defaults to
the configured message; it is display text for the renderer, not validation
performed here.
"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import Field

from teamscards.config import settings

from .base import CardElement, CardModel, ChoiceInputStyle, TextInputStyle


def _default_error_message() -> str:
    return settings.input_error_message


class InputField(CardElement):
    """Fields shared by all inputs."""

    label: Any = None
    is_required: bool = Field(default=False)
    error_message: Any = Field(default_factory=_default_error_message)


class InputText(InputField):
    """Free text input."""

    type: Literal["Input.Text"] = "Input.Text"
    is_multiline: bool = Field(default=False)
    max_length: Any = None
    placeholder: Any = None
    regex: Any = None
    style: TextInputStyle = Field(default=TextInputStyle.TEXT)
    inline_action: Optional["ActionLike"] = None
    value: Any = None


class InputNumber(InputField):
    """Numeric input."""

    type: Literal["Input.Number"] = "Input.Number"
    placeholder: Any = None
    value: Any = None
    min: Any = None
    max: Any = None


class InputDate(InputField):
    """Date picker. Values are ``YYYY-MM-DD`` strings."""

    type: Literal["Input.Date"] = "Input.Date"
    placeholder: Any = Field(default="Select a Date")
    value: Any = None
    min: Any = None
    max: Any = None


class InputTime(InputField):
    """Time picker. Values are ``HH:MM`` strings."""

    type: Literal["Input.Time"] = "Input.Time"
    placeholder: Any = None
    value: Any = None
    min: Any = None
    max: Any = None


class InputToggle(InputField):
    """Checkbox."""

    type: Literal["Input.Toggle"] = "Input.Toggle"
    title: Any = None
    value: Any = None
    value_on: Any = Field(default="true")
    value_off: Any = Field(default="false")
    wrap: bool = Field(default=True)


class Choice(CardModel):
    """A title/value option of a ChoiceSet."""

    title: Any = None
    value: Any = None


ChoiceLike = Annotated[Union[dict[str, Any], Choice], Field(union_mode="left_to_right")]


class InputChoiceSet(InputField):
    """Dropdown, radio buttons or checkboxes depending on style and multi-select."""

    type: Literal["Input.ChoiceSet"] = "Input.ChoiceSet"
    choices: Optional[list[ChoiceLike]] = None
    placeholder: Any = Field(default="Select")
    is_multi_select: bool = Field(default=False)
    style: ChoiceInputStyle = Field(default=ChoiceInputStyle.COMPACT)
    value: Any = None
    wrap: bool = Field(default=False)
