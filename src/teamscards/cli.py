"""Teams card builder CLI."""

import json
import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from teamscards import models
from teamscards.builders import adaptive_card, mention as build_mention, text_block
from teamscards.config import settings
from teamscards.text import normalize as normalize_text

app = typer.Typer(
    name="teamscards",
    help="Build Adaptive Card documents for Microsoft Teams",
    add_completion=False,
)
console = Console()

ENUMS = (
    models.Spacing,
    models.HorizontalAlignment,
    models.VerticalAlignment,
    models.BlockHeight,
    models.Width,
    models.ContainerStyle,
    models.TextColor,
    models.TextSize,
    models.TextWeight,
    models.FontType,
    models.TextBlockStyle,
    models.ImageSize,
    models.ImageStyle,
    models.ActionStyle,
    models.ChoiceInputStyle,
    models.TextInputStyle,
    models.BackgroundImageFillMode,
)


@app.callback()
def main(
    log_level: str = typer.Option(settings.log_level, help="Logging level"),
) -> None:
    """Configure logging for every command."""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


@app.command()
def normalize(text: str = typer.Argument(..., help="Text to normalize")) -> None:
    """Rewrite @<Name> mentions and emoji shortcodes."""
    console.print(normalize_text(text), markup=False, highlight=False, emoji=False)


@app.command()
def mention(
    name: str = typer.Argument(..., help="Display name of the user"),
    user_id: str = typer.Argument(..., help="User id / object id"),
) -> None:
    """Print a mention entity."""
    console.print_json(json.dumps(build_mention(name, user_id)))


@app.command()
def card(
    texts: List[str] = typer.Argument(..., help="One TextBlock per argument"),
    title: Optional[str] = typer.Option(None, help="Optional bold heading"),
    full_width: bool = typer.Option(settings.full_width, help="Full-width card"),
    version: str = typer.Option(settings.card_version, help="Card schema version"),
    envelope: bool = typer.Option(False, help="Print the attachment envelope instead"),
) -> None:
    """Build a card of text blocks and print it as JSON."""
    body = []
    if title:
        body.append(text_block(title, size="large", weight="bolder", style="heading"))
    body.extend(text_block(text) for text in texts)
    document = adaptive_card(body=body, is_full_width=full_width, version=version)

    if envelope:
        from teamscards.envelope import card_attachment

        document = card_attachment(document).serialize()

    console.print_json(json.dumps(document))


@app.command()
def enums() -> None:
    """List the closed enumerations and their values."""
    table = Table(title="Card enumerations")
    table.add_column("Enum", style="bold blue")
    table.add_column("Values")
    for enum_cls in ENUMS:
        table.add_row(enum_cls.__name__, ", ".join(member.value for member in enum_cls))
    console.print(table)


if __name__ == "__main__":
    app()
