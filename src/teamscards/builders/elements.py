"""Element builders: TextBlock and Image."""

from typing import Any, Optional

from teamscards.models import Image, TextBlock

from .base import BuilderGroup


class Elements(BuilderGroup):
    """Builds primitive display nodes."""

    def text_block(self, text: Optional[str] = None, **config: Any) -> dict[str, Any]:
        """Displays text, allowing control over font size, weight and color.

        ``@<Name>`` placeholders in ``text`` become ``<at>Name</at>`` and emoji
        shortcodes become glyphs.

        Args:
            text: Text content.
            **config: color, font_type, horizontal_alignment ("left"), is_subtle
                (False), max_lines, size, weight, wrap (True), style ("default"),
                height, separator (False), spacing, id, is_visible (True).

        Returns:
            TextBlock record.
        """
        return TextBlock(text=self.normalize(text), **config).to_dict()

    def image(self, url: Optional[str] = None, **config: Any) -> dict[str, Any]:
        """Displays a PNG, JPEG or GIF image.

        Args:
            url: Image URL.
            **config: alt_text, background_color, height (enum, weight or
                "50px"), horizontal_alignment ("left"), select_action, size,
                style ("default"), width, separator (False), spacing, id,
                is_visible (True).

        Returns:
            Image record.
        """
        return Image(url=url, **config).to_dict()
