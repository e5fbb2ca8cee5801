"""Slide body parsing."""

from __future__ import annotations

import logging
import stat
from pathlib import Path

from .config import ConfigError, RenderConfig, validate_config
from .constants import (
    BULLET_ITEM_PATTERN,
    BULLET_PREFIXES,
    CODE_FENCE,
    DONE_MARKER,
    FLOW_ARROW_REPLACEMENT,
    FLOW_ARROWS,
    HEADER_PREFIXES,
    IMAGE_LINE_PATTERN,
    NOT_DONE_MARKER,
    NUMBERED_ITEM_PATTERN,
    SEPARATOR_CELL_PATTERN,
    SEPARATOR_ROW_PATTERN,
    TABLE_PREFIX,
    TITLE_PREFIX,
)
from .exceptions import ContentFileError, FileTooLargeError
from .inline import format_text
from .models import (
    CodeBlock,
    ContentBlock,
    FlowBlock,
    ImageBlock,
    ListBlock,
    ParagraphsBlock,
    ParserContext,
    Section,
    SectionKind,
    TableBlock,
)

logger = logging.getLogger(__name__)


def _flush_section(ctx: ParserContext, blocks: list[ContentBlock], config: RenderConfig) -> None:
    """Finalize the open section into a block and clear it.

    Sections without items are dropped. Items are run through the inline
    formatter here, so formatting happens once per emitted item.

    Args:
        ctx: Parser context holding the open section.
        blocks: Output sequence to append to.
        config: Configuration controlling inline formatting.
    """
    section = ctx.section
    if section is None:
        return
    ctx.section = None

    if not section.items:
        if section.title is not None:
            logger.debug("Dropping section %r with no items", section.title)
        return

    items = tuple(format_text(item, config.highlight_quotes) for item in section.items)
    if section.kind is SectionKind.LIST:
        blocks.append(ListBlock(title=section.title, items=items, ordered=bool(section.ordered)))
    else:
        blocks.append(ParagraphsBlock(items=items))


def _open_section(
    ctx: ParserContext,
    blocks: list[ContentBlock],
    config: RenderConfig,
    kind: SectionKind,
    title: str | None = None,
) -> Section:
    _flush_section(ctx, blocks, config)
    ctx.section = Section(kind=kind, title=title)
    return ctx.section


def _try_toggle_fence(ctx: ParserContext, line: str, blocks: list[ContentBlock]) -> bool:
    """Open or close a fenced code block.

    Opening a fence leaves any open section or pending table alone. Closing
    one emits the collected code with trailing whitespace removed.

    Args:
        ctx: Parser context to update.
        line: Current line being scanned.
        blocks: Output sequence to append to.

    Returns:
        bool: True when the line is a fence line and has been consumed.

    Examples:
        _try_toggle_fence(ParserContext(), "```python", [])  # True, fence opened
    """
    if not line.startswith(CODE_FENCE):
        return False

    if ctx.in_code_block:
        code = "".join(f"{code_line}\n" for code_line in ctx.code_lines)
        blocks.append(CodeBlock(text=code.rstrip()))
        ctx.code_lines = []
        ctx.in_code_block = False
    else:
        ctx.in_code_block = True
    return True


def _split_table_cells(line: str) -> list[str]:
    """Split a pipe-table line into trimmed cells.

    Blank cells and cells made only of dashes and colons are dropped.

    Examples:
        _split_table_cells("| a | b |")  # ["a", "b"]
        _split_table_cells("|---|:-:|")  # []
    """
    return [
        cell.strip()
        for cell in line.split(TABLE_PREFIX)
        if cell.strip() and not SEPARATOR_CELL_PATTERN.fullmatch(cell)
    ]


def _try_collect_table_row(
    ctx: ParserContext, line: str, blocks: list[ContentBlock], config: RenderConfig
) -> bool:
    """Collect a pipe-table line into the pending table.

    Args:
        ctx: Parser context to update.
        line: Current line being scanned.
        blocks: Output sequence, used when an open section has to be flushed.
        config: Configuration used when flushing the open section.

    Returns:
        bool: True when the line is a table line and has been consumed.

    Examples:
        ctx = ParserContext()
        _try_collect_table_row(ctx, "| a | b |", [], RenderConfig())
        ctx.table_rows  # [["a", "b"]]
    """
    if not line.startswith(TABLE_PREFIX):
        return False

    _flush_section(ctx, blocks, config)
    if not ctx.in_table:
        ctx.in_table = True
        ctx.table_rows = []

    cells = _split_table_cells(line)
    if cells and not SEPARATOR_ROW_PATTERN.fullmatch(line):
        if all(SEPARATOR_CELL_PATTERN.fullmatch(cell) for cell in cells):
            logger.debug("Keeping malformed separator row as table data: %r", line)
        ctx.table_rows.append(cells)
    return True


def _try_close_table(ctx: ParserContext, blocks: list[ContentBlock]) -> bool:
    """Emit the pending table if it has collected any rows.

    Returns:
        bool: True when a table block was emitted.
    """
    if not ctx.in_table or not ctx.table_rows:
        return False

    header, *rows = ctx.table_rows
    blocks.append(TableBlock(header=tuple(header), rows=tuple(tuple(row) for row in rows)))
    ctx.table_rows = []
    ctx.in_table = False
    return True


def _try_open_header(
    ctx: ParserContext, line: str, blocks: list[ContentBlock], config: RenderConfig
) -> bool:
    """Start a titled list section from a ``##`` or ``###`` line."""
    for prefix in HEADER_PREFIXES:
        if line.startswith(prefix):
            _open_section(ctx, blocks, config, SectionKind.LIST, title=line[len(prefix) :])
            return True
    return False


def _list_item_text(line: str) -> tuple[str, bool] | None:
    """Extract the text of a list item line.

    Args:
        line: Line to inspect.

    Returns:
        tuple[str, bool] | None: Item text (with any checkmark marker
            re-attached) and whether the line was numbered; None when the line
            is not a list item.

    Examples:
        _list_item_text("- item")  # ("item", False)
        _list_item_text("2. step")  # ("step", True)
        _list_item_text("✅ Done")  # ("✅ Done", False)
    """
    if NUMBERED_ITEM_PATTERN.match(line):
        return NUMBERED_ITEM_PATTERN.sub("", line, count=1), True

    if not line.startswith(BULLET_PREFIXES):
        return None

    text = BULLET_ITEM_PATTERN.sub("", line, count=1)
    if line.startswith(DONE_MARKER):
        return f"{DONE_MARKER} {text}", False
    if line.startswith(NOT_DONE_MARKER):
        return f"{NOT_DONE_MARKER} {text}", False
    return text, False


def _try_add_list_item(
    ctx: ParserContext, line: str, blocks: list[ContentBlock], config: RenderConfig
) -> bool:
    """Append a list item, opening an untitled list when no list is open."""
    item = _list_item_text(line)
    if item is None:
        return False

    text, numbered = item
    section = ctx.section
    if section is None or section.kind is not SectionKind.LIST:
        section = _open_section(ctx, blocks, config, SectionKind.LIST)

    section.items.append(text)
    section.ordered = numbered if section.ordered is None else section.ordered and numbered
    return True


def _try_emit_image(
    ctx: ParserContext, line: str, blocks: list[ContentBlock], config: RenderConfig
) -> bool:
    if not config.extract_images:
        return False

    image_match = IMAGE_LINE_PATTERN.fullmatch(line)
    if not image_match:
        return False

    _flush_section(ctx, blocks, config)
    blocks.append(ImageBlock(alt=image_match.group(1), src=image_match.group(2)))
    return True


def _try_emit_flow(
    ctx: ParserContext, line: str, blocks: list[ContentBlock], config: RenderConfig
) -> bool:
    if not config.flow_lines or not any(arrow in line for arrow in FLOW_ARROWS):
        return False

    _flush_section(ctx, blocks, config)
    text = line
    for arrow in FLOW_ARROWS:
        text = text.replace(arrow, FLOW_ARROW_REPLACEMENT)
    blocks.append(FlowBlock(text=text.strip()))
    return True


def _add_text_line(
    ctx: ParserContext, line: str, blocks: list[ContentBlock], config: RenderConfig
) -> None:
    section = ctx.section
    if section is None or section.kind is not SectionKind.TEXT:
        section = _open_section(ctx, blocks, config, SectionKind.TEXT)
    section.items.append(line)


def parse_content(body: str, config: RenderConfig | None = None) -> list[ContentBlock]:
    """Parse a slide body into an ordered list of content blocks.

    Scans ``\\n``-separated lines once. Each line is matched against, in
    order: title lines (skipped), code fences, code content, table rows,
    table termination (which does not consume the line), section headers,
    list items, the optional image and flow lines, and plain text. Blank lines
    never open or flush a section.

    Malformed input never raises: an unterminated table is emitted at the end,
    an unterminated code block is discarded, and headers without items produce
    nothing.

    Args:
        body: Authored slide content.
        config: Configuration enabling optional constructs. Defaults to a new
            `RenderConfig` when omitted.

    Returns:
        list[ContentBlock]: Blocks in the order they were completed.

    Raises:
        ConfigError: If the configuration fails validation.

    Examples:
        parse_content("## Steps\\n1. Write\\n2. Run")
        # [ListBlock(title="Steps", items=(...), ordered=True)]
    """
    config = config or RenderConfig()
    validate_config(config)

    ctx = ParserContext()
    blocks: list[ContentBlock] = []

    for line in body.split("\n"):
        # The slide title is shown separately
        if line.startswith(TITLE_PREFIX):
            continue

        if _try_toggle_fence(ctx, line, blocks):
            continue

        if ctx.in_code_block:
            ctx.code_lines.append(line)
            continue

        if _try_collect_table_row(ctx, line, blocks, config):
            continue

        _try_close_table(ctx, blocks)

        if _try_open_header(ctx, line, blocks, config):
            continue

        if _try_add_list_item(ctx, line, blocks, config):
            continue

        if _try_emit_image(ctx, line, blocks, config):
            continue

        if _try_emit_flow(ctx, line, blocks, config):
            continue

        if line.strip():
            _add_text_line(ctx, line, blocks, config)

    _flush_section(ctx, blocks, config)
    _try_close_table(ctx, blocks)

    if ctx.in_code_block:
        logger.debug("Discarding unterminated code block (%d lines)", len(ctx.code_lines))

    return blocks


def _read_slide(filepath: Path, max_size: int) -> str:
    """Read a slide file as UTF-8 text.

    Only regular files are read, so a named pipe cannot block the caller.
    A leading byte-order mark is dropped so a title on the first line is
    still recognised.

    Raises:
        FileTooLargeError: If the file is larger than `max_size` bytes.
        ContentFileError: If the file is not a regular file, cannot be read,
            or is not valid UTF-8.
    """
    try:
        stat_result = filepath.stat()
    except OSError as error:
        raise ContentFileError(f"Error accessing {filepath}: {error}") from error

    if not stat.S_ISREG(stat_result.st_mode):
        raise ContentFileError(f"{filepath} is not a regular file.")
    if stat_result.st_size > max_size:
        raise FileTooLargeError(filepath, stat_result.st_size, max_size)

    try:
        return filepath.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as error:
        raise ContentFileError(f"Invalid UTF-8 sequence in {filepath}: {error}") from error
    except OSError as error:
        raise ContentFileError(f"Error reading {filepath}: {error}") from error


def parse_file(filepath: Path, config: RenderConfig | None = None) -> list[ContentBlock]:
    """Read a slide file and parse its body.

    Args:
        filepath: Path to the slide file.
        config: Configuration controlling parsing and the file size limit;
            defaults to a new `RenderConfig` when omitted.

    Returns:
        list[ContentBlock]: Blocks parsed from the file content.

    Raises:
        ContentFileError: If the configuration is invalid, the file is too
            large, or it cannot be read or decoded.

    Examples:
        blocks = parse_file(Path("slides/intro.md"))
    """
    config = config or RenderConfig()
    try:
        validate_config(config)
    except ConfigError as error:
        raise ContentFileError(str(error)) from error

    content = _read_slide(filepath, config.max_file_size)
    logger.debug("Parsing %s (%d characters)", filepath, len(content))
    return parse_content(content, config)
