"""Serialization of parsed content blocks."""

from __future__ import annotations

import json
from collections.abc import Iterable

from .constants import CODE_FENCE, SEPARATOR_ROW_PATTERN, TABLE_PREFIX
from .models import (
    CodeBlock,
    ContentBlock,
    FlowBlock,
    FormattedText,
    ImageBlock,
    ListBlock,
    ParagraphsBlock,
    Span,
    TableBlock,
)


def span_to_dict(span: Span) -> dict[str, str]:
    return {"kind": span.kind.name.lower(), "text": span.text}


def _formatted_to_dict(item: FormattedText) -> dict[str, object]:
    return {"text": item.text, "spans": [span_to_dict(span) for span in item.spans]}


def block_to_dict(block: ContentBlock) -> dict[str, object]:
    """Describe a content block as JSON-ready data.

    Every description carries a ``"type"`` key naming the block kind
    (``list``, ``paragraphs``, ``code``, ``table``, ``image`` or ``flow``).

    Args:
        block: Block to describe.

    Returns:
        dict[str, object]: Plain dictionaries, lists and strings only.

    Raises:
        TypeError: If `block` is not a known content block.

    Examples:
        block_to_dict(CodeBlock(text="x = 1"))  # {"type": "code", "text": "x = 1"}
    """
    data: dict[str, object] = {"type": getattr(block, "kind", None)}

    if isinstance(block, ListBlock):
        data["title"] = block.title
        data["ordered"] = block.ordered
        data["items"] = [_formatted_to_dict(item) for item in block.items]
    elif isinstance(block, ParagraphsBlock):
        data["items"] = [_formatted_to_dict(item) for item in block.items]
    elif isinstance(block, CodeBlock):
        data["text"] = block.text
    elif isinstance(block, TableBlock):
        data["header"] = list(block.header)
        data["rows"] = [list(row) for row in block.rows]
    elif isinstance(block, ImageBlock):
        data["alt"] = block.alt
        data["src"] = block.src
    elif isinstance(block, FlowBlock):
        data["text"] = block.text
    else:
        raise TypeError(f"Unsupported content block: {block!r}")

    return data


def blocks_to_dicts(blocks: Iterable[ContentBlock]) -> list[dict[str, object]]:
    return [block_to_dict(block) for block in blocks]


def render_json(blocks: Iterable[ContentBlock], indent: int = 2) -> str:
    """Serialize blocks to a JSON array; an `indent` of 0 gives compact output."""
    return json.dumps(blocks_to_dicts(blocks), indent=indent or None, ensure_ascii=False)


# Separator-only row: flushes an open section without emitting a block
SECTION_BREAK = f"{TABLE_PREFIX}---{TABLE_PREFIX}\n"


def _table_line(cells: tuple[str, ...]) -> str:
    line = f"{TABLE_PREFIX} " + f" {TABLE_PREFIX} ".join(cells) + f" {TABLE_PREFIX}"
    # Without its closing pipe a dash-only row is no longer read as a separator
    if SEPARATOR_ROW_PATTERN.fullmatch(line):
        return line[: -len(TABLE_PREFIX)].rstrip() + "\n"
    return f"{line}\n"


def _needs_section_break(previous: ContentBlock | None, block: ContentBlock) -> bool:
    """Tell whether `block` would merge into, or jump ahead of, the section before it.

    Fences do not flush an open section, and adjacent paragraph sets or
    adjacent untitled lists would be read back as one. A list after a
    paragraph set needs no break since list lines close the paragraphs.
    """
    if not isinstance(previous, (ListBlock, ParagraphsBlock)):
        return False
    if isinstance(block, CodeBlock):
        return True
    if isinstance(block, ParagraphsBlock):
        return isinstance(previous, ParagraphsBlock)
    if isinstance(block, ListBlock):
        return isinstance(previous, ListBlock) and block.title is None
    return False


def _block_lines(block: ContentBlock) -> list[str]:
    if isinstance(block, ListBlock):
        lines = [] if block.title is None else [f"## {block.title}\n"]
        for number, text in enumerate(block.texts, start=1):
            marker = f"{number}." if block.ordered else "-"
            lines.append(f"{marker} {text}\n")
        return lines
    if isinstance(block, ParagraphsBlock):
        return [f"{text}\n" for text in block.texts]
    if isinstance(block, CodeBlock):
        code_lines = [f"{code_line}\n" for code_line in block.text.split("\n")]
        return [f"{CODE_FENCE}\n", *code_lines, f"{CODE_FENCE}\n"]
    if isinstance(block, TableBlock):
        separator = TABLE_PREFIX + "---|" * len(block.header) + "\n"
        return [_table_line(block.header), separator, *(_table_line(row) for row in block.rows)]
    if isinstance(block, ImageBlock):
        return [f"![{block.alt}]({block.src})\n"]
    if isinstance(block, FlowBlock):
        return [f"{block.text}\n"]
    raise TypeError(f"Unsupported content block: {block!r}")


def render_markup(blocks: Iterable[ContentBlock]) -> list[str]:
    """Re-emit blocks as normalized slide markup.

    Lists use ``-`` bullets (or ``1.`` numbering when ordered) under a ``##``
    header when titled, tables get a ``|---|`` separator row, and blocks are
    separated by a blank line. A bare ``|---|`` line is placed between blocks
    that would otherwise merge when read back. For a body parsed with the default
    configuration, parsing the joined output yields the same blocks.

    Args:
        blocks: Blocks to render.

    Returns:
        list[str]: Output lines, each ending with a newline.

    Raises:
        TypeError: If a block is not a known content block.

    Examples:
        "".join(render_markup(parse_content("- a\\n- b")))  # "- a\\n- b\\n"
    """
    lines: list[str] = []
    previous: ContentBlock | None = None
    for block in blocks:
        if lines:
            lines.append("\n")
        if _needs_section_break(previous, block):
            lines.append(SECTION_BREAK)
        lines.extend(_block_lines(block))
        previous = block
    return lines
