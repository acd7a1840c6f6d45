"""Teams card builder: declarative Adaptive Card construction for Microsoft Teams."""

from teamscards.builders import (
    action_set,
    adaptive_card,
    background_image,
    build_document,
    checkbox,
    choice,
    column,
    column_set,
    container,
    date_input,
    fact,
    fact_set,
    image,
    image_set,
    mention,
    number_input,
    open_url,
    select,
    show_card,
    submit,
    table,
    table_cell,
    table_column,
    table_row,
    tagify,
    text_block,
    text_input,
    time_input,
    toggle_visibility,
)
from teamscards.exceptions import CardConfigurationError
from teamscards.text import TextNormalizer, normalize

__version__ = "0.1.0"

__all__ = [
    "CardConfigurationError",
    "TextNormalizer",
    "action_set",
    "adaptive_card",
    "background_image",
    "build_document",
    "checkbox",
    "choice",
    "column",
    "column_set",
    "container",
    "date_input",
    "fact",
    "fact_set",
    "image",
    "image_set",
    "mention",
    "normalize",
    "number_input",
    "open_url",
    "select",
    "show_card",
    "submit",
    "table",
    "table_cell",
    "table_column",
    "table_row",
    "tagify",
    "text_block",
    "text_input",
    "time_input",
    "toggle_visibility",
]
