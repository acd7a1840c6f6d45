"""Container builders: grouping nodes and their helper records."""

from typing import Any, Optional

from teamscards.models import (
    ActionSet,
    BackgroundImage,
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

from .base import BuilderGroup


class Containers(BuilderGroup):
    """Builds nodes that nest other nodes.

    Child arrays are kept in the order given. Plain records pass through
    untouched; model instances are serialized in place.
    """

    def container(self, items: Optional[list] = None, **config: Any) -> dict[str, Any]:
        """Groups items together.

        Args:
            items: Nodes placed inside the container.
            **config: select_action, style ("default"), vertical_content_alignment
                ("top"), bleed (False), background_image (URL or record),
                min_height, rtl, height, separator (False), spacing, id,
                is_visible (True).
        """
        return Container(items=items, **config).to_dict()

    def column(self, items: Optional[list] = None, **config: Any) -> dict[str, Any]:
        """A column to be placed inside a column set.

        ``width`` may be "auto", "stretch", a relative weight (50) or pixels
        ("50px").
        """
        return Column(items=items, **config).to_dict()

    def column_set(self, columns: Optional[list] = None, **config: Any) -> dict[str, Any]:
        """Divides a region into columns so elements sit side by side."""
        return ColumnSet(columns=columns, **config).to_dict()

    def fact(self, title: Optional[str] = None, value: Optional[str] = None) -> dict[str, Any]:
        """A fact row. Both title and value are normalized."""
        return Fact(title=self.normalize(title), value=self.normalize(value)).to_dict()

    def fact_set(self, facts: Optional[list] = None, **config: Any) -> dict[str, Any]:
        """Displays a series of facts as a table."""
        return FactSet(facts=facts, **config).to_dict()

    def image_set(self, images: Optional[list] = None, **config: Any) -> dict[str, Any]:
        """Displays a collection of images like a gallery."""
        return ImageSet(images=images, **config).to_dict()

    def table_column(self, width: Any = None, **config: Any) -> dict[str, Any]:
        """Column definition of a table."""
        return TableColumnDefinition(width=width, **config).to_dict()

    def table_cell(self, items: Optional[list] = None, **config: Any) -> dict[str, Any]:
        """A table cell holding nodes, styled like a container."""
        return TableCell(items=items, **config).to_dict()

    def table_row(self, cells: Optional[list] = None, **config: Any) -> dict[str, Any]:
        """A row of table cells."""
        return TableRow(cells=cells, **config).to_dict()

    def table(
        self,
        rows: Optional[list] = None,
        columns: Optional[list] = None,
        **config: Any,
    ) -> dict[str, Any]:
        """Displays rows of cells against column definitions.

        Args:
            rows: Table rows, first row used as header by default.
            columns: Column definitions.
            **config: first_row_as_header (True), show_grid_lines (True),
                grid_style ("default"), horizontal_cell_content_alignment
                ("left"), vertical_cell_content_alignment ("top"), plus the
                common node fields.
        """
        return Table(rows=rows, columns=columns, **config).to_dict()

    def action_set(self, actions: Optional[list] = None, **config: Any) -> dict[str, Any]:
        """Displays actions inside the card body."""
        return ActionSet(actions=actions, **config).to_dict()

    def background_image(self, url: Optional[str] = None, **config: Any) -> dict[str, Any]:
        """Background image record. Alignment defaults to center on both axes."""
        return BackgroundImage(url=url, **config).to_dict()
