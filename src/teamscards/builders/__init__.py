"""Builder groups for Teams Adaptive Cards.

Each group is a class taking an optional text normalizer; the module exposes a
default instance per group and plain function aliases for every builder.

Builders:
- elements: text_block, image
- containers: container, column, column_set, fact, fact_set, image_set,
  table, table_row, table_cell, table_column, action_set, background_image
- inputs: text_input, number_input, date_input, time_input, checkbox,
  choice, select
- actions: open_url, submit, show_card, toggle_visibility
- cards: adaptive_card (build_document)
- entities: mention, tagify
"""

from .actions import ACTION_STYLES, Actions, resolve_action_style
from .base import BuilderGroup
from .cards import Cards, build_metadata
from .containers import Containers
from .elements import Elements
from .entities import Entities
from .inputs import Inputs

elements_builder = Elements()
containers_builder = Containers()
inputs_builder = Inputs()
actions_builder = Actions()
cards_builder = Cards()
entities_builder = Entities()

# Elements
text_block = elements_builder.text_block
image = elements_builder.image

# Containers
container = containers_builder.container
column = containers_builder.column
column_set = containers_builder.column_set
fact = containers_builder.fact
fact_set = containers_builder.fact_set
image_set = containers_builder.image_set
table = containers_builder.table
table_row = containers_builder.table_row
table_cell = containers_builder.table_cell
table_column = containers_builder.table_column
action_set = containers_builder.action_set
background_image = containers_builder.background_image

# Inputs
text_input = inputs_builder.text_input
number_input = inputs_builder.number_input
date_input = inputs_builder.date_input
time_input = inputs_builder.time_input
checkbox = inputs_builder.checkbox
choice = inputs_builder.choice
select = inputs_builder.select

# Actions
open_url = actions_builder.open_url
submit = actions_builder.submit
show_card = actions_builder.show_card
toggle_visibility = actions_builder.toggle_visibility

# Cards
adaptive_card = cards_builder.adaptive_card
build_document = cards_builder.adaptive_card

# Entities
mention = entities_builder.mention
tagify = entities_builder.tagify

__all__ = [
    "ACTION_STYLES",
    "Actions",
    "BuilderGroup",
    "Cards",
    "Containers",
    "Elements",
    "Entities",
    "Inputs",
    "build_metadata",
    "resolve_action_style",
    "action_set",
    "actions_builder",
    "adaptive_card",
    "background_image",
    "build_document",
    "cards_builder",
    "checkbox",
    "choice",
    "column",
    "column_set",
    "container",
    "containers_builder",
    "date_input",
    "elements_builder",
    "entities_builder",
    "fact",
    "fact_set",
    "image",
    "image_set",
    "inputs_builder",
    "mention",
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
