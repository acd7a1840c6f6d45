"""Tests for display text normalization."""

import pytest

from teamscards.text import MENTION_PATTERN, TextNormalizer, emojize, normalize

SMILE = "\U0001F604"


class TestMentionRewrite:
    """Tests for @<Name> placeholder rewriting."""

    def test_single_mention(self):
        """A placeholder becomes <at> markup with surrounding text intact."""
        assert normalize("Hello @<Jane>") == "Hello <at>Jane</at>"

    def test_multiple_mentions(self):
        """Every placeholder is rewritten, left to right."""
        assert normalize("@<Jane> and @<John Doe>!") == "<at>Jane</at> and <at>John Doe</at>!"

    def test_repeated_brackets_collapse(self):
        """Doubled angle brackets are absorbed into one mention."""
        assert normalize("ping @<<Jane>>") == "ping <at>Jane</at>"

    def test_unterminated_placeholder_passes_through(self):
        """An unterminated placeholder is left literally."""
        assert normalize("Hello @<Jane") == "Hello @<Jane"

    def test_square_bracket_blocks_match(self):
        """Names containing '[' are not treated as mentions."""
        assert normalize("@<[Jane]>") == "@<[Jane]>"

    def test_pattern_captures_inner_text(self):
        """The pattern captures only the name."""
        match = MENTION_PATTERN.search("x @<Jane> y")
        assert match.group(1) == "Jane"


class TestEmojiRewrite:
    """Tests for emoji shortcode conversion."""

    def test_known_shortcode(self):
        """Known shortcodes become glyphs."""
        assert emojize("Hi :smile:") == f"Hi {SMILE}"

    def test_unknown_shortcode_is_kept(self):
        """Unknown shortcodes and the text around them are preserved."""
        assert normalize("a :definitely_not_an_emoji: b") == "a :definitely_not_an_emoji: b"

    def test_mention_and_emoji_together(self):
        """Both rewrites apply to the same string."""
        assert normalize("Hey @<Jane> :smile:") == f"Hey <at>Jane</at> {SMILE}"


class TestNormalize:
    """Tests for the normalize contract."""

    @pytest.mark.parametrize("text", [None, ""])
    def test_empty_values_pass_through(self, text):
        """None and empty strings are returned unchanged."""
        assert normalize(text) == text

    @pytest.mark.parametrize(
        "text",
        ["Build 42 passed", "plain <b>html</b>", "email me at jane@example.com"],
    )
    def test_identity_without_placeholders(self, text):
        """Text without shortcodes or placeholders is unchanged."""
        assert normalize(text) == text

    def test_idempotent_on_normalized_text(self):
        """Normalizing twice gives the same result as once."""
        once = normalize("Hey @<Jane> :smile:")
        assert normalize(once) == once

    def test_injected_emojizer(self, stub_normalizer):
        """The emoji lookup is a swappable collaborator applied after mentions."""
        assert stub_normalizer.normalize("@<Jane> :ok:") == "<at>Jane</at> OK"
        stub_normalizer.emojizer.assert_called_once_with("<at>Jane</at> :ok:")

    def test_injected_emojizer_not_called_for_empty(self, stub_normalizer):
        """Empty text never reaches the emoji lookup."""
        stub_normalizer.normalize("")
        stub_normalizer.emojizer.assert_not_called()

    def test_callable(self):
        """A normalizer can be used as a plain function."""
        assert TextNormalizer()("@<Jane>") == "<at>Jane</at>"
