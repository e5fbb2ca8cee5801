import dataclasses

import pytest

from slide_content.models import (
    FormattedText,
    ListBlock,
    ParagraphsBlock,
    ParserContext,
    Section,
    SectionKind,
    Span,
    SpanKind,
)


def test_span_kind_members():
    assert list(SpanKind) == [
        SpanKind.PLAIN,
        SpanKind.BOLD,
        SpanKind.ITALIC,
        SpanKind.CODE,
        SpanKind.QUOTE,
    ]


def test_parser_context_defaults():
    ctx = ParserContext()

    assert ctx.section is None
    assert ctx.in_code_block is False
    assert ctx.code_lines == []
    assert ctx.in_table is False
    assert ctx.table_rows == []


def test_parser_contexts_do_not_share_buffers():
    first = ParserContext()
    second = ParserContext()
    first.code_lines.append("x")
    first.table_rows.append(["a"])

    assert second.code_lines == []
    assert second.table_rows == []


def test_section_defaults():
    section = Section(kind=SectionKind.TEXT)

    assert section.title is None
    assert section.items == []
    assert section.ordered is None


def test_blocks_are_immutable():
    block = ListBlock(title=None, items=(FormattedText("a", (Span(SpanKind.PLAIN, "a"),)),))

    with pytest.raises(dataclasses.FrozenInstanceError):
        block.title = "changed"


def test_block_texts():
    items = (FormattedText("one"), FormattedText("two"))

    assert ListBlock(title="T", items=items).texts == ["one", "two"]
    assert ParagraphsBlock(items=items).texts == ["one", "two"]
    assert ListBlock.kind == "list"
    assert ParagraphsBlock.kind == "paragraphs"
