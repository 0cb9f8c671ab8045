"""
Atlassian Document Format (ADF) utilities.

This module converts plain text descriptions into ADF documents for Jira
Cloud rich text fields, and renders ADF documents returned by Jira back
into Markdown.
"""

import re
from typing import Any

# Matches "<digits>. <rest>" at the start of a trimmed line
ORDERED_ITEM_PATTERN = re.compile(r"^(\d+)\. (.*)", re.ASCII)

HEADING_MAX_LENGTH = 50
HEADING_TERMINATORS = (".", "?", "!")
HEADING_LEVEL_LIMIT = 100


def _text_node(text: str) -> dict[str, Any]:
    return {"type": "text", "text": text}


def _list_item(text: str) -> dict[str, Any]:
    return {
        "type": "listItem",
        "content": [{"type": "paragraph", "content": [_text_node(text)]}],
    }


def text_to_adf(text: str) -> dict[str, Any]:
    """
    Convert plain text to an Atlassian Document Format (ADF) document.

    Each line is classified in order:

    - blank lines close any open list
    - ``- item`` lines become bullet list items
    - ``1. item`` lines become ordered list items (the number is dropped)
    - short lines (under 50 characters) that do not end in ``.``, ``?`` or
      ``!`` and are followed by a blank line (or end the text) become
      level 2 headings
    - everything else becomes a paragraph

    Consecutive items of the same kind are collected in a single list node.

    Args:
        text: Plain text, newline delimited

    Returns:
        ADF document dictionary
    """
    lines = (text or "").split("\n")
    content: list[dict[str, Any]] = []
    current_list: dict[str, Any] | None = None

    for index, line in enumerate(lines):
        stripped = line.strip()
        next_line = lines[index + 1] if index + 1 < len(lines) else ""

        if not stripped:
            current_list = None
            continue

        if stripped.startswith("- "):
            if current_list is None or current_list["type"] != "bulletList":
                current_list = {"type": "bulletList", "content": []}
                content.append(current_list)
            current_list["content"].append(_list_item(stripped[2:]))
            continue

        ordered_match = ORDERED_ITEM_PATTERN.match(stripped)
        if ordered_match:
            if current_list is None or current_list["type"] != "orderedList":
                current_list = {"type": "orderedList", "content": []}
                content.append(current_list)
            current_list["content"].append(_list_item(ordered_match.group(2)))
            continue

        if (
            (not next_line.strip() or index == len(lines) - 1)
            and not stripped.endswith(HEADING_TERMINATORS)
            and len(stripped) < HEADING_MAX_LENGTH
        ):
            current_list = None
            content.append(
                {
                    "type": "heading",
                    "attrs": {"level": 2},
                    "content": [_text_node(stripped)],
                }
            )
            continue

        content.append({"type": "paragraph", "content": [_text_node(line)]})

    return {"version": 1, "type": "doc", "content": content}


def adf_to_markdown(adf: Any) -> str:
    """
    Convert an Atlassian Document Format (ADF) document to Markdown.

    Accepts either a full ``doc`` node or a raw list of block nodes.
    Unknown node types are rendered as the concatenation of their children,
    so documents containing node types this module does not know about still
    produce readable output.

    Args:
        adf: ADF document (dict) or content list

    Returns:
        Markdown string, or an empty string for anything that is not ADF
    """
    if isinstance(adf, dict):
        content = adf.get("content", adf)
    elif isinstance(adf, list):
        content = adf
    else:
        return ""

    if not isinstance(content, list):
        return ""

    return "\n\n".join(_render_node(node) for node in content).strip()


def _children(node: dict[str, Any]) -> list[Any]:
    content = node.get("content")
    return content if isinstance(content, list) else []


def _render_children(node: dict[str, Any], separator: str = "") -> str:
    return separator.join(_render_node(child) for child in _children(node))


def _render_node(node: Any) -> str:
    """Render a single ADF node to Markdown."""
    if not isinstance(node, dict) or not node.get("type"):
        return ""

    attrs = node.get("attrs")
    if not isinstance(attrs, dict):
        attrs = {}

    match node["type"]:
        case "doc":
            return _render_children(node, "\n\n")
        case "paragraph":
            return _render_children(node)
        case "text":
            return _render_text(node)
        case "heading":
            return f"{'#' * _heading_level(attrs)} {_render_children(node)}"
        case "bulletList":
            return "\n".join(
                _render_list_item(item, "- ") for item in _children(node)
            )
        case "orderedList":
            return "\n".join(
                _render_list_item(item, f"{position}. ")
                for position, item in enumerate(_children(node), start=1)
            )
        case "listItem":
            return _render_children(node, "\n")
        case "codeBlock":
            language = attrs.get("language") or ""
            code = _render_children(node, "\n")
            return f"```{language}\n{code}\n```"
        case "blockquote":
            quoted = _render_children(node, "\n")
            return "\n".join(f"> {line}" for line in quoted.split("\n"))
        case "rule":
            return "---"
        case "table":
            return _render_table(node)
        case "image":
            alt = attrs.get("alt") or ""
            src = attrs.get("src") or ""
            return f"![{alt}]({src})"
        case "hardBreak":
            return "\n"
        case _:
            return _render_children(node)


def _render_text(node: dict[str, Any]) -> str:
    text = node.get("text") or ""
    if not isinstance(text, str):
        text = str(text)
    marks = node.get("marks")
    if not isinstance(marks, list):
        return text

    for mark in marks:
        if not isinstance(mark, dict):
            continue
        match mark.get("type"):
            case "strong":
                text = f"**{text}**"
            case "em":
                text = f"*{text}*"
            case "code":
                text = f"`{text}`"
            case "strike":
                text = f"~~{text}~~"
            case "link":
                mark_attrs = mark.get("attrs")
                href = ""
                if isinstance(mark_attrs, dict):
                    href = mark_attrs.get("href") or ""
                text = f"[{text}]({href})"
    return text


def _heading_level(attrs: dict[str, Any]) -> int:
    level = attrs.get("level") or 1
    try:
        level = int(level)
    except (TypeError, ValueError, OverflowError):
        return 1
    # Levels past the limit are treated as malformed, not clamped
    return level if level <= HEADING_LEVEL_LIMIT else 1


def _render_list_item(item: Any, prefix: str) -> str:
    """Render a list item with its marker, indenting continuation lines."""
    content = _render_children(item, "\n") if isinstance(item, dict) else ""
    return prefix + content.replace("\n", "\n  ")


def _render_table(node: dict[str, Any]) -> str:
    rows: list[list[str]] = []
    for row in _children(node):
        if not isinstance(row, dict) or not isinstance(row.get("content"), list):
            continue
        cells = []
        for cell in row["content"]:
            cell_text = _render_children(cell) if isinstance(cell, dict) else ""
            cells.append(cell_text.replace("|", "\\|"))
        rows.append(cells)

    if not rows:
        return ""

    header, *body = rows
    lines = [
        _table_line(header),
        _table_line(["---"] * len(header)),
        *(_table_line(row) for row in body),
    ]
    return "\n".join(lines)


def _table_line(cells: list[str]) -> str:
    return f"| {' | '.join(cells)} |"
