"""Tests for container builders."""

from teamscards.builders import (
    action_set,
    background_image,
    column,
    column_set,
    container,
    fact,
    fact_set,
    image,
    image_set,
    open_url,
    table,
    table_cell,
    table_column,
    table_row,
    text_block,
)
from teamscards.models import Container, ContainerStyle, TextBlock

SMILE = "\U0001F604"


class TestContainer:
    """Tests for Container building."""

    def test_defaults(self):
        """Container defaults style, alignment, bleed and visibility."""
        items = [text_block("a")]
        assert container(items=items) == {
            "type": "Container",
            "items": items,
            "style": "default",
            "verticalContentAlignment": "top",
            "bleed": False,
            "separator": False,
            "isVisible": True,
        }

    def test_items_unchanged(self):
        """Items keep their order and structure."""
        items = [text_block("a"), image(url="u"), text_block("b")]
        assert container(items=items)["items"] == items

    def test_hand_written_items_verbatim(self):
        """Plain records are not re-defaulted."""
        items = [{"type": "TextBlock", "text": "raw"}, {"type": "Media", "sources": []}]
        assert container(items=items)["items"] == items

    def test_model_items_serialized(self):
        """Model instances are serialized like builder output."""
        out = container(items=[TextBlock(text="a")])
        assert out["items"] == [TextBlock(text="a").to_dict()]

    def test_input_not_mutated(self):
        """Builders never mutate the records they are given."""
        items = [text_block("a")]
        snapshot = [dict(item) for item in items]
        container(items=items, style="emphasis")
        assert items == snapshot

    def test_style_aliases_and_background(self):
        """Colour aliases and URL backgrounds are accepted."""
        out = container(items=[], style=ContainerStyle.GREY, background_image="https://bg", rtl=True)
        assert out["style"] == "emphasis"
        assert out["backgroundImage"] == "https://bg"
        assert out["rtl"] is True

    def test_missing_items_absent(self):
        """No items means no items key."""
        assert "items" not in container()

    def test_nested_containers(self):
        """Containers nest inside containers."""
        inner = container(items=[text_block("deep")])
        outer = container(items=[inner])
        assert outer["items"][0]["items"][0]["text"] == "deep"

    def test_model_round_trip(self):
        """Builder output parses back into the model."""
        out = container(items=[text_block("a")], min_height="100px")
        assert Container.model_validate(out).to_dict() == out


class TestColumns:
    """Tests for Column and ColumnSet building."""

    def test_column_defaults(self):
        """Columns default alignment, style and bleed."""
        col = column(items=[text_block("a")], width="stretch")
        assert col["type"] == "Column"
        assert col["width"] == "stretch"
        assert col["verticalContentAlignment"] == "top"
        assert col["horizontalAlignment"] == "left"
        assert col["style"] == "default"
        assert col["bleed"] is False

    def test_column_weight(self):
        """Widths may be relative weights."""
        assert column(items=[], width=2)["width"] == 2

    def test_column_fractional_weight(self):
        """Fractional weights are not truncated or rejected."""
        assert column(items=[], width=1.5)["width"] == 1.5

    def test_column_set(self):
        """ColumnSet keeps columns in order."""
        cols = [column(items=[text_block("l")]), column(items=[text_block("r")])]
        out = column_set(columns=cols)
        assert out["type"] == "ColumnSet"
        assert out["columns"] == cols
        assert out["horizontalAlignment"] == "left"
        assert out["style"] == "default"


class TestFacts:
    """Tests for FactSet building."""

    def test_fact_normalized(self):
        """Fact title and value are normalized."""
        assert fact("Owner :smile:", "@<Jane>") == {
            "title": f"Owner {SMILE}",
            "value": "<at>Jane</at>",
        }

    def test_fact_set(self):
        """FactSet keeps facts in order."""
        facts = [fact("a", "1"), fact("b", "2")]
        out = fact_set(facts=facts)
        assert out["type"] == "FactSet"
        assert out["facts"] == facts


class TestImageSet:
    """Tests for ImageSet building."""

    def test_image_set(self):
        """ImageSet keeps images and size."""
        images = [image(url="a"), image(url="b")]
        out = image_set(images=images, image_size="small")
        assert out["type"] == "ImageSet"
        assert out["images"] == images
        assert out["imageSize"] == "small"


class TestTable:
    """Tests for Table building."""

    def test_table_defaults(self):
        """Tables default header, grid lines and cell alignment."""
        rows = [table_row(cells=[table_cell(items=[text_block("h")])])]
        columns = [table_column(width=1)]
        out = table(rows=rows, columns=columns)
        assert out["type"] == "Table"
        assert out["rows"] == rows
        assert out["columns"] == [{"width": 1}]
        assert out["firstRowAsHeader"] is True
        assert out["showGridLines"] is True
        assert out["gridStyle"] == "default"
        assert out["horizontalCellContentAlignment"] == "left"
        assert out["verticalCellContentAlignment"] == "top"

    def test_table_column_fractional_width(self):
        """Column definitions keep fractional weights."""
        assert table_column(width=0.5) == {"width": 0.5}

    def test_row_and_cell(self):
        """Rows and cells carry their discriminators and defaults."""
        cell = table_cell(items=[text_block("x")])
        row = table_row(cells=[cell], style="accent")
        assert cell["type"] == "TableCell"
        assert cell["style"] == "default"
        assert cell["verticalContentAlignment"] == "top"
        assert row == {"type": "TableRow", "cells": [cell], "style": "accent"}


class TestActionSet:
    """Tests for ActionSet building."""

    def test_action_set(self):
        """ActionSet keeps actions in order."""
        actions = [open_url(url="https://a", title="A"), open_url(url="https://b", title="B")]
        out = action_set(actions=actions)
        assert out["type"] == "ActionSet"
        assert out["actions"] == actions
        assert out["horizontalAlignment"] == "left"


class TestBackgroundImage:
    """Tests for background image records."""

    def test_defaults(self):
        """Background images center on both axes by default."""
        assert background_image(url="https://bg", fill_mode="cover") == {
            "url": "https://bg",
            "fillMode": "cover",
            "horizontalAlignment": "center",
            "verticalAlignment": "center",
        }

    def test_in_container(self):
        """A background image record nests verbatim."""
        bg = background_image(url="https://bg")
        assert container(items=[], background_image=bg)["backgroundImage"] == bg
