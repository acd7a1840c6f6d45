"""Tests for mention entities."""

from teamscards.builders import Entities, mention, tagify, text_block
from teamscards.models import Mention


class TestMention:
    """Tests for mention building."""

    def test_mention(self):
        """A mention pairs markup text with the mentioned user."""
        assert mention("Jane", "u123") == {
            "type": "mention",
            "text": "<at>Jane</at>",
            "mentioned": {"id": "u123", "name": "Jane"},
        }

    def test_tagify(self):
        """tagify wraps a name in mention markup."""
        assert tagify("Jane Doe") == "<at>Jane Doe</at>"

    def test_mention_not_normalized(self):
        """Names are used verbatim, without emoji conversion."""
        assert mention(":smile:", "u1")["text"] == "<at>:smile:</at>"

    def test_matches_text_block_placeholder(self):
        """The normalizer's rewrite produces the same markup as the entity."""
        entity = mention("Jane", "u123")
        block = text_block("Hello @<Jane>")
        assert block["text"] == "Hello <at>Jane</at>"
        assert entity["text"] in block["text"]

    def test_model_parses(self):
        """Mention records validate into the model."""
        record = Entities().mention("Jane", "u123")
        assert Mention.model_validate(record).mentioned.name == "Jane"
