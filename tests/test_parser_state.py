from slide_content.config import RenderConfig
from slide_content.models import (
    CodeBlock,
    ListBlock,
    ParagraphsBlock,
    ParserContext,
    Section,
    SectionKind,
    TableBlock,
)
from slide_content.parser import (
    _flush_section,
    _list_item_text,
    _split_table_cells,
    _try_add_list_item,
    _try_close_table,
    _try_collect_table_row,
    _try_open_header,
    _try_toggle_fence,
)


def test_try_toggle_fence_opens_without_touching_other_state():
    section = Section(kind=SectionKind.TEXT, items=["open"])
    ctx = ParserContext(section=section, in_table=True, table_rows=[["h"]])
    blocks = []

    assert _try_toggle_fence(ctx, "```python", blocks) is True
    assert ctx.in_code_block is True
    assert ctx.section is section
    assert ctx.table_rows == [["h"]]
    assert blocks == []


def test_try_toggle_fence_closes_and_emits_code():
    ctx = ParserContext(in_code_block=True, code_lines=["x = 1", "  "])
    blocks = []

    assert _try_toggle_fence(ctx, "```", blocks) is True
    assert ctx.in_code_block is False
    assert ctx.code_lines == []
    assert blocks == [CodeBlock(text="x = 1")]


def test_try_toggle_fence_ignores_other_lines():
    ctx = ParserContext()

    assert _try_toggle_fence(ctx, "``not a fence", []) is False
    assert _try_toggle_fence(ctx, " ```", []) is False
    assert ctx.in_code_block is False


def test_split_table_cells():
    assert _split_table_cells("| a | b |") == ["a", "b"]
    assert _split_table_cells("|---|:-:|") == []
    assert _split_table_cells("| --- |") == ["---"]


def test_try_collect_table_row_starts_table_and_flushes_section():
    ctx = ParserContext(section=Section(kind=SectionKind.LIST, items=["item"]))
    blocks = []

    assert _try_collect_table_row(ctx, "| a | b |", blocks, RenderConfig()) is True
    assert ctx.section is None
    assert ctx.in_table is True
    assert ctx.table_rows == [["a", "b"]]
    assert isinstance(blocks[0], ListBlock)


def test_try_collect_table_row_skips_separator_rows():
    ctx = ParserContext()

    assert _try_collect_table_row(ctx, "|:---|---:|", [], RenderConfig()) is True
    assert ctx.in_table is True
    assert ctx.table_rows == []


def test_try_close_table_requires_rows():
    ctx = ParserContext(in_table=True)
    blocks = []

    assert _try_close_table(ctx, blocks) is False
    assert ctx.in_table is True

    ctx.table_rows = [["h1", "h2"], ["a", "b"]]
    assert _try_close_table(ctx, blocks) is True
    assert ctx.in_table is False
    assert ctx.table_rows == []
    assert blocks == [TableBlock(header=("h1", "h2"), rows=(("a", "b"),))]


def test_try_open_header_replaces_section():
    ctx = ParserContext(section=Section(kind=SectionKind.TEXT, items=["text"]))
    blocks = []

    assert _try_open_header(ctx, "### Details", blocks, RenderConfig()) is True
    assert ctx.section == Section(kind=SectionKind.LIST, title="Details")
    assert isinstance(blocks[0], ParagraphsBlock)

    assert _try_open_header(ctx, "#### Deep", blocks, RenderConfig()) is False


def test_list_item_text():
    assert _list_item_text("- item") == ("item", False)
    assert _list_item_text("12. step") == ("step", True)
    assert _list_item_text("✅ Done") == ("✅ Done", False)
    assert _list_item_text("❌ Nope") == ("❌ Nope", False)
    assert _list_item_text("plain") is None


def test_try_add_list_item_appends_to_titled_list():
    ctx = ParserContext(section=Section(kind=SectionKind.LIST, title="Steps"))

    assert _try_add_list_item(ctx, "1. one", [], RenderConfig()) is True
    assert _try_add_list_item(ctx, "2. two", [], RenderConfig()) is True
    assert ctx.section.title == "Steps"
    assert ctx.section.items == ["one", "two"]
    assert ctx.section.ordered is True

    assert _try_add_list_item(ctx, "- three", [], RenderConfig()) is True
    assert ctx.section.ordered is False


def test_flush_section_drops_empty_sections():
    ctx = ParserContext(section=Section(kind=SectionKind.LIST, title="Empty"))
    blocks = []

    _flush_section(ctx, blocks, RenderConfig())

    assert ctx.section is None
    assert blocks == []


def test_flush_section_without_section_is_noop():
    ctx = ParserContext()
    blocks = []

    _flush_section(ctx, blocks, RenderConfig())

    assert blocks == []
