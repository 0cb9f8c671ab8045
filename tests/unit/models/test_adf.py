"""
Tests for the ADF (Atlassian Document Format) conversions.

text_to_adf turns plain text descriptions into ADF documents for Jira Cloud,
adf_to_markdown renders ADF returned by Jira as Markdown.
"""

import pytest

from mcp_jira.models.jira.adf import adf_to_markdown, text_to_adf


def _text(text, marks=None):
    node = {"type": "text", "text": text}
    if marks is not None:
        node["marks"] = marks
    return node


def _paragraph(*children):
    return {"type": "paragraph", "content": list(children)}


def _list_item(*children):
    return {"type": "listItem", "content": list(children)}


def _item_texts(list_node):
    return [
        item["content"][0]["content"][0]["text"] for item in list_node["content"]
    ]


class TestTextToAdf:
    """Tests for the text_to_adf function."""

    def test_empty_string(self):
        """Test that empty text produces an empty document."""
        assert text_to_adf("") == {"version": 1, "type": "doc", "content": []}

    def test_none_input(self):
        """Test that None is treated like empty text."""
        assert text_to_adf(None)["content"] == []

    def test_only_blank_lines(self):
        assert text_to_adf("\n   \n\t\n")["content"] == []

    def test_bullet_list(self):
        """Test that consecutive bullet lines form one bullet list."""
        doc = text_to_adf("- a\n- b")

        assert len(doc["content"]) == 1
        bullet_list = doc["content"][0]
        assert bullet_list["type"] == "bulletList"
        assert [item["type"] for item in bullet_list["content"]] == [
            "listItem",
            "listItem",
        ]
        assert _item_texts(bullet_list) == ["a", "b"]

    def test_list_item_structure(self):
        doc = text_to_adf("- a")
        assert doc["content"][0]["content"][0] == {
            "type": "listItem",
            "content": [{"type": "paragraph", "content": [_text("a")]}],
        }

    def test_bullet_marker_after_indentation(self):
        """Test that list markers are detected on trimmed lines."""
        doc = text_to_adf("   - indented")
        assert doc["content"][0]["type"] == "bulletList"
        assert _item_texts(doc["content"][0]) == ["indented"]

    def test_ordered_list(self):
        """Test that consecutive numbered lines form one ordered list."""
        doc = text_to_adf("1. a\n2. b")

        assert len(doc["content"]) == 1
        ordered_list = doc["content"][0]
        assert ordered_list["type"] == "orderedList"
        assert _item_texts(ordered_list) == ["a", "b"]

    def test_ordered_list_drops_numbers(self):
        """Test that the original numerals are not kept in the document."""
        doc = text_to_adf("5. a\n6. b")
        assert _item_texts(doc["content"][0]) == ["a", "b"]
        assert "attrs" not in doc["content"][0]

    def test_number_without_space_is_not_list(self):
        doc = text_to_adf("1.5 litres of water were needed for this recipe.")
        assert doc["content"][0]["type"] == "paragraph"

    def test_list_type_switch_starts_new_list(self):
        """Test that switching between bullets and numbers starts a new list."""
        doc = text_to_adf("- a\n1. b\n- c")

        assert [node["type"] for node in doc["content"]] == [
            "bulletList",
            "orderedList",
            "bulletList",
        ]

    def test_blank_line_closes_list(self):
        """Test that a blank line between bullets splits the list."""
        doc = text_to_adf("- a\n\n- b")

        assert [node["type"] for node in doc["content"]] == [
            "bulletList",
            "bulletList",
        ]

    def test_paragraph_between_bullets_keeps_list_open(self):
        """Test that a paragraph line does not close an open list."""
        doc = text_to_adf(
            "- first\nThis line is long enough and ends with a full stop.\n- second"
        )

        assert [node["type"] for node in doc["content"]] == [
            "bulletList",
            "paragraph",
        ]
        assert _item_texts(doc["content"][0]) == ["first", "second"]

    def test_heading_before_blank_line(self):
        """Test the heading heuristic followed by a sentence."""
        doc = text_to_adf("Overview\n\nThis is a longer sentence that ends in a period.")

        heading, paragraph = doc["content"]
        assert heading == {
            "type": "heading",
            "attrs": {"level": 2},
            "content": [_text("Overview")],
        }
        assert paragraph["type"] == "paragraph"
        assert paragraph["content"][0]["text"] == (
            "This is a longer sentence that ends in a period."
        )

    def test_short_last_line_becomes_heading(self):
        """Test that a short unterminated last line is a heading."""
        doc = text_to_adf("Done")
        assert doc["content"][0]["type"] == "heading"

    def test_short_line_before_blank_line_is_heading_even_if_unintended(self):
        """Test that the heuristic turns any short isolated line into a heading."""
        doc = text_to_adf("thanks\n\nbye")
        assert [node["type"] for node in doc["content"]] == ["heading", "heading"]

    @pytest.mark.parametrize("terminator", [".", "?", "!"])
    def test_terminated_line_is_paragraph(self, terminator):
        doc = text_to_adf(f"Short line{terminator}\n\nNext")
        assert doc["content"][0]["type"] == "paragraph"

    def test_long_line_is_paragraph(self):
        line = "x" * 50
        doc = text_to_adf(f"{line}\n")
        assert doc["content"][0]["type"] == "paragraph"

    def test_line_of_49_chars_is_heading(self):
        line = "x" * 49
        doc = text_to_adf(f"{line}\n")
        assert doc["content"][0]["type"] == "heading"

    def test_short_line_followed_by_text_is_paragraph(self):
        doc = text_to_adf("Steps\nrun the build then deploy.")
        assert [node["type"] for node in doc["content"]] == [
            "paragraph",
            "paragraph",
        ]

    def test_heading_uses_trimmed_text(self):
        doc = text_to_adf("  Title  \n")
        assert doc["content"][0]["content"][0]["text"] == "Title"

    def test_paragraph_keeps_untrimmed_line(self):
        doc = text_to_adf("  indented line that is followed by more text\nmore.")
        assert doc["content"][0]["content"][0]["text"] == (
            "  indented line that is followed by more text"
        )

    def test_heading_closes_list(self):
        """Test that a heading after bullets closes the open list."""
        doc = text_to_adf("- a\nNotes\n\n- b")

        assert [node["type"] for node in doc["content"]] == [
            "bulletList",
            "heading",
            "bulletList",
        ]

    def test_order_of_nodes_preserved(self):
        doc = text_to_adf(
            "Intro text that is definitely a paragraph.\n- a\n- b\nClosing remark here."
        )
        assert [node["type"] for node in doc["content"]] == [
            "paragraph",
            "bulletList",
            "paragraph",
        ]


class TestAdfToMarkdown:
    """Tests for the adf_to_markdown function."""

    # =========================================================================
    # Input Handling
    # =========================================================================

    @pytest.mark.parametrize("value", [None, "plain text", 42, 1.5, True])
    def test_non_adf_input(self, value):
        """Test that anything that is not a dict or list renders as ''."""
        assert adf_to_markdown(value) == ""

    def test_empty_doc(self):
        assert adf_to_markdown({"type": "doc", "content": []}) == ""

    def test_doc_without_content(self):
        assert adf_to_markdown({"type": "doc"}) == ""

    def test_doc_with_non_list_content(self):
        assert adf_to_markdown({"type": "doc", "content": "oops"}) == ""

    def test_raw_content_list(self):
        """Test that a bare list of block nodes is accepted."""
        assert adf_to_markdown([_paragraph(_text("a")), _paragraph(_text("b"))]) == (
            "a\n\nb"
        )

    def test_null_nodes_are_ignored(self):
        assert adf_to_markdown([None, _paragraph(_text("x")), 3]) == "x"

    def test_node_without_type(self):
        assert adf_to_markdown([{"content": [_text("x")]}]) == ""

    # =========================================================================
    # Block Nodes
    # =========================================================================

    def test_paragraphs_joined_by_blank_line(self):
        doc = {
            "type": "doc",
            "content": [_paragraph(_text("Hello "), _text("world")), _paragraph(_text("Bye"))],
        }
        assert adf_to_markdown(doc) == "Hello world\n\nBye"

    def test_heading(self):
        node = {"type": "heading", "attrs": {"level": 3}, "content": [_text("Title")]}
        assert adf_to_markdown([node]) == "### Title"

    def test_heading_default_level(self):
        node = {"type": "heading", "content": [_text("Title")]}
        assert adf_to_markdown([node]) == "# Title"

    def test_heading_level_not_clamped(self):
        node = {"type": "heading", "attrs": {"level": 8}, "content": [_text("T")]}
        assert adf_to_markdown([node]) == "######## T"

    @pytest.mark.parametrize(
        "level", [float("inf"), float("-inf"), float("nan"), "two", [2], 10**20]
    )
    def test_malformed_heading_level_defaults_to_one(self, level):
        node = {"type": "heading", "attrs": {"level": level}, "content": [_text("T")]}
        assert adf_to_markdown({"type": "doc", "content": [node]}) == "# T"

    def test_bullet_list(self):
        node = {
            "type": "bulletList",
            "content": [
                _list_item(_paragraph(_text("a"))),
                _list_item(_paragraph(_text("b"))),
            ],
        }
        assert adf_to_markdown([node]) == "- a\n- b"

    def test_ordered_list_uses_position(self):
        """Test that stored numbers are ignored in favour of the position."""
        node = {
            "type": "orderedList",
            "attrs": {"order": 5},
            "content": [
                _list_item(_paragraph(_text("a"))),
                _list_item(_paragraph(_text("b"))),
            ],
        }
        assert adf_to_markdown([node]) == "1. a\n2. b"

    def test_nested_list_is_indented(self):
        """Test that nested list lines get two extra spaces."""
        nested = {
            "type": "bulletList",
            "content": [
                _list_item(_paragraph(_text("child 1"))),
                _list_item(_paragraph(_text("child 2"))),
            ],
        }
        node = {
            "type": "bulletList",
            "content": [_list_item(_paragraph(_text("parent")), nested)],
        }
        assert adf_to_markdown([node]) == "- parent\n  - child 1\n  - child 2"

    def test_list_item_with_multiple_paragraphs(self):
        node = {
            "type": "orderedList",
            "content": [_list_item(_paragraph(_text("one")), _paragraph(_text("two")))],
        }
        assert adf_to_markdown([node]) == "1. one\n  two"

    def test_code_block_with_language(self):
        node = {
            "type": "codeBlock",
            "attrs": {"language": "python"},
            "content": [_text("print('hi')")],
        }
        assert adf_to_markdown([node]) == "```python\nprint('hi')\n```"

    def test_code_block_without_language(self):
        node = {"type": "codeBlock", "content": [_text("a"), _text("b")]}
        assert adf_to_markdown([node]) == "```\na\nb\n```"

    def test_blockquote_prefixes_every_line(self):
        node = {
            "type": "blockquote",
            "content": [_paragraph(_text("first")), _paragraph(_text("second"))],
        }
        assert adf_to_markdown([node]) == "> first\n> second"

    def test_rule(self):
        assert adf_to_markdown([{"type": "rule"}]) == "---"

    def test_image(self):
        node = {"type": "image", "attrs": {"alt": "logo", "src": "https://x/logo.png"}}
        assert adf_to_markdown([node]) == "![logo](https://x/logo.png)"

    def test_image_defaults(self):
        assert adf_to_markdown([{"type": "image"}]) == "![]()"

    def test_hard_break(self):
        paragraph = _paragraph(_text("line 1"), {"type": "hardBreak"}, _text("line 2"))
        assert adf_to_markdown([paragraph]) == "line 1\nline 2"

    # =========================================================================
    # Text Marks
    # =========================================================================

    @pytest.mark.parametrize(
        ("mark", "expected"),
        [
            ("strong", "**x**"),
            ("em", "*x*"),
            ("code", "`x`"),
            ("strike", "~~x~~"),
        ],
    )
    def test_single_mark(self, mark, expected):
        assert adf_to_markdown([_paragraph(_text("x", [{"type": mark}]))]) == expected

    def test_marks_applied_in_order(self):
        """Test that strong then em wraps the strong text in em."""
        node = _text("x", [{"type": "strong"}, {"type": "em"}])
        assert adf_to_markdown([_paragraph(node)]) == "***x***"

    def test_link_mark(self):
        node = _text("docs", [{"type": "link", "attrs": {"href": "https://example.com"}}])
        assert adf_to_markdown([_paragraph(node)]) == "[docs](https://example.com)"

    def test_link_mark_without_href(self):
        node = _text("docs", [{"type": "link"}])
        assert adf_to_markdown([_paragraph(node)]) == "[docs]()"

    def test_unknown_mark_ignored(self):
        node = _text("x", [{"type": "textColor", "attrs": {"color": "#f00"}}])
        assert adf_to_markdown([_paragraph(node)]) == "x"

    def test_text_without_text(self):
        assert adf_to_markdown([_paragraph({"type": "text"})]) == ""

    @pytest.mark.parametrize(
        ("value", "expected"), [(5, "5"), (True, "True"), ({"x": 1}, "{'x': 1}")]
    )
    def test_non_string_text_is_stringified(self, value, expected):
        doc = {"type": "doc", "content": [_paragraph(_text(value))]}
        assert adf_to_markdown(doc) == expected

    def test_non_string_text_with_marks(self):
        node = _text({"x": 1}, [])
        assert adf_to_markdown([_paragraph(node, _text(7, [{"type": "strong"}]))]) == (
            "{'x': 1}**7**"
        )

    # =========================================================================
    # Tables
    # =========================================================================

    @staticmethod
    def _row(*cells):
        return {
            "type": "tableRow",
            "content": [
                {"type": "tableCell", "content": [_paragraph(_text(cell))]}
                for cell in cells
            ],
        }

    def test_table(self):
        """Test header, separator and data rows."""
        table = {
            "type": "table",
            "content": [self._row("H1", "H2"), self._row("a", "b")],
        }
        result = adf_to_markdown([table])

        assert result.split("\n") == ["| H1 | H2 |", "| --- | --- |", "| a | b |"]

    def test_table_escapes_pipes(self):
        table = {"type": "table", "content": [self._row("a|b"), self._row("c")]}
        assert adf_to_markdown([table]) == "| a\\|b |\n| --- |\n| c |"

    def test_empty_table(self):
        assert adf_to_markdown([{"type": "table", "content": []}]) == ""

    def test_table_skips_malformed_rows(self):
        table = {
            "type": "table",
            "content": [
                {"type": "tableRow", "content": "not a list"},
                self._row("H"),
                "garbage",
                self._row("v"),
            ],
        }
        assert adf_to_markdown([table]) == "| H |\n| --- |\n| v |"

    # =========================================================================
    # Unknown Nodes
    # =========================================================================

    def test_unknown_node_concatenates_children(self):
        assert adf_to_markdown([{"type": "panel", "content": [_text("x")]}]) == "x"

    def test_unknown_node_without_children(self):
        assert adf_to_markdown([{"type": "mention", "attrs": {"id": "1"}}]) == ""

    def test_unknown_inline_node_inside_paragraph(self):
        paragraph = _paragraph(_text("a"), {"type": "emoji"}, _text("b"))
        assert adf_to_markdown([paragraph]) == "ab"


class TestConversionRoundTrip:
    """Encoding then rendering is lossy; these tests pin the documented losses."""

    def test_ordered_numbers_are_normalized(self):
        assert adf_to_markdown(text_to_adf("5. a\n6. b")) == "1. a\n2. b"

    def test_heading_gains_markup(self):
        result = adf_to_markdown(
            text_to_adf("Summary\n\nThe build fails on the release branch.")
        )
        assert result == "## Summary\n\nThe build fails on the release branch."

    def test_bullets_survive(self):
        assert adf_to_markdown(text_to_adf("- a\n- b")) == "- a\n- b"
