"""Text normalization applied to user-facing strings before they reach a card.

Two rewrites run in order:
1. Mention placeholders ``@<Name>`` become ``<at>Name</at>`` markup.
2. Emoji shortcodes (``:smile:``) become Unicode glyphs via the ``emoji`` package.

Unrecognized shortcodes are left as literal text.
"""

import logging
import re
from typing import Callable, Optional

import emoji

from teamscards.config import settings

logger = logging.getLogger(__name__)

# @<Jane> -> <at>Jane</at>; repeated brackets (@<<Jane>>) collapse.
MENTION_PATTERN = re.compile(r"@<+([^>\[]+)>+")
MENTION_MARKUP = r"<at>\1</at>"


def emojize(text: str) -> str:
    """Replace emoji shortcodes with their Unicode glyphs."""
    return emoji.emojize(text, language=settings.emoji_language)


class TextNormalizer:
    """Rewrites mention placeholders and emoji shortcodes in display text.

    The emoji lookup is an injected collaborator so tests (or callers with a
    different shortcode table) can swap it out.
    """

    def __init__(self, emojizer: Optional[Callable[[str], str]] = None):
        self.emojizer = emojizer or emojize

    def rewrite_mentions(self, text: str) -> str:
        """Rewrite every ``@<Name>`` placeholder into ``<at>Name</at>``."""
        rewritten, count = MENTION_PATTERN.subn(MENTION_MARKUP, text)
        if count:
            logger.debug("Rewrote %d mention placeholder(s)", count)
        return rewritten

    def normalize(self, text: Optional[str]) -> Optional[str]:
        """Normalize display text. ``None`` and ``""`` pass through unchanged."""
        if not text:
            return text
        return self.emojizer(self.rewrite_mentions(str(text)))

    __call__ = normalize


default_normalizer = TextNormalizer()


def normalize(text: Optional[str]) -> Optional[str]:
    """Normalize text with the process-wide normalizer."""
    return default_normalizer.normalize(text)
