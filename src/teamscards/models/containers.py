"""Container nodes that group other nodes."""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import Field

from .base import (
    BackgroundImageLike,
    CardElement,
    CardModel,
    ContainerStyle,
    HorizontalAlignment,
    ImageSize,
    VerticalAlignment,
)
from .elements import Image


class Container(CardElement):
    """Groups items together."""

    type: Literal["Container"] = "Container"
    items: Optional[list["NodeLike"]] = None
    select_action: Optional["ActionLike"] = None
    style: ContainerStyle = Field(default=ContainerStyle.DEFAULT)
    vertical_content_alignment: VerticalAlignment = Field(default=VerticalAlignment.TOP)
    bleed: bool = Field(default=False, description="Bleed through the parent's padding")
    background_image: Optional[BackgroundImageLike] = None
    min_height: Any = None
    rtl: Optional[bool] = None


class Column(CardElement):
    """A single column inside a ColumnSet."""

    type: Literal["Column"] = "Column"
    items: Optional[list["NodeLike"]] = None
    # auto / stretch, a relative weight, or a pixel string like "50px"
    width: Any = None
    background_image: Optional[BackgroundImageLike] = None
    bleed: bool = Field(default=False)
    min_height: Any = None
    rtl: Optional[bool] = None
    select_action: Optional["ActionLike"] = None
    style: ContainerStyle = Field(default=ContainerStyle.DEFAULT)
    vertical_content_alignment: VerticalAlignment = Field(default=VerticalAlignment.TOP)
    horizontal_alignment: HorizontalAlignment = Field(default=HorizontalAlignment.LEFT)


ColumnLike = Annotated[Union[dict[str, Any], Column], Field(union_mode="left_to_right")]


class ColumnSet(CardElement):
    """Divides a region into Columns so elements sit side by side."""

    type: Literal["ColumnSet"] = "ColumnSet"
    columns: Optional[list[ColumnLike]] = None
    select_action: Optional["ActionLike"] = None
    style: ContainerStyle = Field(default=ContainerStyle.DEFAULT)
    bleed: bool = Field(default=False)
    min_height: Any = None
    horizontal_alignment: HorizontalAlignment = Field(default=HorizontalAlignment.LEFT)


class Fact(CardModel):
    """A title/value pair in a FactSet."""

    title: Any = None
    value: Any = None


FactLike = Annotated[Union[dict[str, Any], Fact], Field(union_mode="left_to_right")]


class FactSet(CardElement):
    """Displays facts as a two-column table."""

    type: Literal["FactSet"] = "FactSet"
    facts: Optional[list[FactLike]] = None


ImageLike = Annotated[Union[dict[str, Any], Image], Field(union_mode="left_to_right")]


class ImageSet(CardElement):
    """Displays a gallery of images."""

    type: Literal["ImageSet"] = "ImageSet"
    images: Optional[list[ImageLike]] = None
    image_size: Optional[ImageSize] = None


class TableColumnDefinition(CardModel):
    """Width and alignment of one table column."""

    width: Any = None
    horizontal_cell_content_alignment: Optional[HorizontalAlignment] = None
    vertical_cell_content_alignment: Optional[VerticalAlignment] = None


class TableCell(CardElement):
    """A cell of a table row. Lays out its items like a Container."""

    type: Literal["TableCell"] = "TableCell"
    items: Optional[list["NodeLike"]] = None
    select_action: Optional["ActionLike"] = None
    style: ContainerStyle = Field(default=ContainerStyle.DEFAULT)
    vertical_content_alignment: VerticalAlignment = Field(default=VerticalAlignment.TOP)
    bleed: bool = Field(default=False)
    background_image: Optional[BackgroundImageLike] = None
    min_height: Any = None
    rtl: Optional[bool] = None


TableCellLike = Annotated[Union[dict[str, Any], TableCell], Field(union_mode="left_to_right")]


class TableRow(CardModel):
    """A row of table cells."""

    type: Literal["TableRow"] = "TableRow"
    cells: Optional[list[TableCellLike]] = None
    style: Optional[ContainerStyle] = None
    horizontal_cell_content_alignment: Optional[HorizontalAlignment] = None
    vertical_cell_content_alignment: Optional[VerticalAlignment] = None


TableColumnLike = Annotated[
    Union[dict[str, Any], TableColumnDefinition], Field(union_mode="left_to_right")
]
TableRowLike = Annotated[Union[dict[str, Any], TableRow], Field(union_mode="left_to_right")]


class Table(CardElement):
    """Displays rows of cells laid out against column definitions."""

    type: Literal["Table"] = "Table"
    columns: Optional[list[TableColumnLike]] = None
    rows: Optional[list[TableRowLike]] = None
    first_row_as_header: bool = Field(default=True)
    show_grid_lines: bool = Field(default=True)
    grid_style: ContainerStyle = Field(default=ContainerStyle.DEFAULT)
    horizontal_cell_content_alignment: HorizontalAlignment = Field(
        default=HorizontalAlignment.LEFT
    )
    vertical_cell_content_alignment: VerticalAlignment = Field(
        default=VerticalAlignment.TOP
    )


class ActionSet(CardElement):
    """Displays a set of actions inside the card body."""

    type: Literal["ActionSet"] = "ActionSet"
    actions: Optional[list["ActionLike"]] = None
    horizontal_alignment: HorizontalAlignment = Field(default=HorizontalAlignment.LEFT)
