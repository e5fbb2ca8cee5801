from __future__ import annotations

import pytest

from slide_content.inline import (
    apply_bold,
    apply_code,
    apply_italic,
    apply_quotes,
    format_inline,
    format_text,
)
from slide_content.models import FormattedText, Span, SpanKind

P = SpanKind.PLAIN
B = SpanKind.BOLD
I = SpanKind.ITALIC
C = SpanKind.CODE
Q = SpanKind.QUOTE


def _spans(*pairs: tuple[SpanKind, str]) -> list[Span]:
    return [Span(kind, text) for kind, text in pairs]


def test_format_inline_applies_passes_in_order():
    assert format_inline("This is **bold** and *italic* and `code`.") == _spans(
        (P, "This is "),
        (B, "bold"),
        (P, " and "),
        (I, "italic"),
        (P, " and "),
        (C, "code"),
        (P, "."),
    )


def test_plain_text_is_a_single_span():
    assert format_inline("nothing special") == _spans((P, "nothing special"))


def test_empty_text_has_no_spans():
    assert format_inline("") == []


def test_bold_matches_are_shortest_and_non_overlapping():
    assert apply_bold(_spans((P, "**a** b **c**"))) == _spans((B, "a"), (P, " b "), (B, "c"))


def test_bold_requires_content():
    assert apply_bold(_spans((P, "****"))) == _spans((P, "****"))
    # the italic pass then pairs the first and third asterisks
    assert format_inline("****") == _spans((I, "*"), (P, "*"))


def test_bold_text_is_not_reconsidered_by_later_passes():
    assert format_inline("**`x` and *y***") == _spans((B, "`x` and *y"), (P, "*"))


def test_unpaired_bold_delimiter_pairs_with_later_asterisk():
    assert format_inline("a **b *c") == _spans((P, "a "), (I, "*b "), (P, "c"))


def test_italic_does_not_span_across_bold():
    assert format_inline("*a **b** c*") == _spans((P, "*a "), (B, "b"), (P, " c*"))


def test_italic_claims_text_before_code_pass():
    assert format_inline("`a*b*c`") == _spans((P, "`a"), (I, "b"), (P, "c`"))


def test_code_spans_keep_asterisk_free_content():
    assert apply_code(_spans((P, "run `pip install` now"))) == _spans(
        (P, "run "), (C, "pip install"), (P, " now")
    )


def test_passes_leave_non_plain_spans_alone():
    spans = _spans((C, "**x**"), (P, "*y*"))

    assert apply_bold(spans) == spans
    assert apply_italic(spans) == _spans((C, "**x**"), (I, "y"))


def test_unmatched_delimiters_stay_plain():
    assert format_inline("a ` b * c") == _spans((P, "a ` b * c"))


def test_quotes_only_highlighted_when_requested():
    assert format_inline('say "hi"') == _spans((P, 'say "hi"'))
    assert format_inline('say "hi"', highlight_quotes=True) == _spans((P, "say "), (Q, '"hi"'))


def test_quote_pass_ignores_code_spans():
    assert apply_quotes(_spans((C, '"x"'), (P, '"y"'))) == _spans((C, '"x"'), (Q, '"y"'))


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("**A** *B* `C`", _spans((B, "A"), (P, " "), (I, "B"), (P, " "), (C, "C"))),
        ("✅ **Done**", _spans((P, "✅ "), (B, "Done"))),
    ],
)
def test_format_inline_examples(text: str, expected: list[Span]):
    assert format_inline(text) == expected


def test_format_text_keeps_source_text():
    formatted = format_text("**a** b")

    assert formatted == FormattedText(text="**a** b", spans=(Span(B, "a"), Span(P, " b")))
