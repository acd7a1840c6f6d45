"""Input builders: form fields.

Every input defaults ``is_required`` to False and ``error_message`` to the
configured message (``settings.input_error_message``). Nothing here checks that
``id`` is present or that ``min`` is below ``max``; the renderer decides.
"""

from typing import Any, Optional

from teamscards.models import (
    Choice,
    InputChoiceSet,
    InputDate,
    InputNumber,
    InputText,
    InputTime,
    InputToggle,
)

from .base import BuilderGroup


class Inputs(BuilderGroup):
    """Builds form-field nodes."""

    def text_input(self, id: Optional[str] = None, **config: Any) -> dict[str, Any]:
        """Text input field.

        Args:
            id: Field id, required by the renderer.
            **config: is_multiline (False), max_length, placeholder, regex,
                style ("text"), inline_action, value, label, is_required
                (False), error_message, height, separator (False), spacing,
                is_visible (True).
        """
        return InputText(id=id, **config).to_dict()

    def number_input(self, id: Optional[str] = None, **config: Any) -> dict[str, Any]:
        """Number input field with optional ``min`` and ``max``."""
        return InputNumber(id=id, **config).to_dict()

    def date_input(self, id: Optional[str] = None, **config: Any) -> dict[str, Any]:
        """Date input field. Placeholder defaults to "Select a Date"."""
        return InputDate(id=id, **config).to_dict()

    def time_input(self, id: Optional[str] = None, **config: Any) -> dict[str, Any]:
        """Time input field."""
        return InputTime(id=id, **config).to_dict()

    def checkbox(
        self,
        id: Optional[str] = None,
        title: Optional[str] = None,
        **config: Any,
    ) -> dict[str, Any]:
        """Checkbox (Input.Toggle).

        Args:
            id: Field id.
            title: Checkbox text, normalized.
            **config: value, value_on ("true"), value_off ("false"), wrap (True),
                label, is_required (False), error_message, separator (False),
                spacing, is_visible (True).
        """
        return InputToggle(id=id, title=self.normalize(title), **config).to_dict()

    def choice(self, title: Optional[str] = None, value: Optional[str] = None) -> dict[str, Any]:
        """A select option. The title is normalized."""
        return Choice(title=self.normalize(title), value=value).to_dict()

    def select(
        self,
        id: Optional[str] = None,
        choices: Optional[list] = None,
        **config: Any,
    ) -> dict[str, Any]:
        """Choice set rendered as a dropdown, radio buttons or checkboxes.

        Args:
            id: Field id.
            choices: Options, each with a ``title`` and ``value``.
            **config: placeholder ("Select"), is_multi_select (False), style
                ("compact"; "expanded" for radio buttons), value, wrap (False),
                label, is_required (False), error_message, separator (False),
                spacing, is_visible (True).
        """
        return InputChoiceSet(id=id, choices=choices, **config).to_dict()
