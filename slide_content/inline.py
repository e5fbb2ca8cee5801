"""Inline emphasis formatting for list items and paragraphs."""

from __future__ import annotations

import re

from .constants import BOLD_PATTERN, INLINE_CODE_PATTERN, ITALIC_PATTERN, QUOTE_PATTERN
from .models import FormattedText, Span, SpanKind


def _rewrite_plain_spans(
    spans: list[Span], pattern: re.Pattern[str], kind: SpanKind, keep_delimiters: bool = False
) -> list[Span]:
    """Split every plain span on `pattern`, turning each match into a `kind` span.

    Non-plain spans pass through untouched, so text claimed by an earlier pass
    is never reconsidered. Matches are found left to right and never overlap.

    Args:
        spans: Span sequence produced by the previous pass.
        pattern: Pattern whose first group is the span content.
        kind: Span kind assigned to each match.
        keep_delimiters: Keep the whole match as span text instead of only the
            first group.

    Returns:
        list[Span]: Rewritten span sequence. Empty plain fragments are dropped.

    Examples:
        _rewrite_plain_spans([Span(SpanKind.PLAIN, "a `b`")], INLINE_CODE_PATTERN, SpanKind.CODE)
        # [Span(PLAIN, "a "), Span(CODE, "b")]
    """
    rewritten: list[Span] = []

    for span in spans:
        if span.kind is not SpanKind.PLAIN:
            rewritten.append(span)
            continue

        offset = 0
        for match in pattern.finditer(span.text):
            if match.start() > offset:
                rewritten.append(Span(SpanKind.PLAIN, span.text[offset : match.start()]))
            rewritten.append(Span(kind, match.group(0 if keep_delimiters else 1)))
            offset = match.end()

        if offset < len(span.text):
            rewritten.append(Span(SpanKind.PLAIN, span.text[offset:]))

    return rewritten


def apply_bold(spans: list[Span]) -> list[Span]:
    """Turn shortest ``**...**`` runs inside plain spans into bold spans."""
    return _rewrite_plain_spans(spans, BOLD_PATTERN, SpanKind.BOLD)


def apply_italic(spans: list[Span]) -> list[Span]:
    """Turn shortest ``*...*`` runs inside plain spans into italic spans.

    Runs after `apply_bold`. A lone ``*`` left over from an unpaired bold
    delimiter pairs with the next ``*`` in the same plain span.

    Examples:
        apply_italic([Span(SpanKind.PLAIN, "a **b *c")])
        # [Span(PLAIN, "a "), Span(ITALIC, "*b "), Span(PLAIN, "c")]
    """
    return _rewrite_plain_spans(spans, ITALIC_PATTERN, SpanKind.ITALIC)


def apply_code(spans: list[Span]) -> list[Span]:
    """Turn shortest backtick-delimited runs inside plain spans into code spans."""
    return _rewrite_plain_spans(spans, INLINE_CODE_PATTERN, SpanKind.CODE)


def apply_quotes(spans: list[Span]) -> list[Span]:
    """Mark double-quoted runs inside plain spans, keeping the quotes visible."""
    return _rewrite_plain_spans(spans, QUOTE_PATTERN, SpanKind.QUOTE, keep_delimiters=True)


def format_inline(line: str, highlight_quotes: bool = False) -> list[Span]:
    """Split a line of text into emphasis spans.

    Applies the bold, italic and inline-code passes in that order to the
    running span list; each pass only looks at text the earlier passes left
    plain. The quote pass runs last and only when requested.

    Args:
        line: Text of a list item or paragraph.
        highlight_quotes: Whether to mark double-quoted text as quote spans.

    Returns:
        list[Span]: Spans covering the whole line in order. An empty line
            yields an empty list.

    Examples:
        format_inline("This is **bold** and `code`.")
        # [PLAIN "This is ", BOLD "bold", PLAIN " and ", CODE "code", PLAIN "."]
    """
    spans = [Span(SpanKind.PLAIN, line)] if line else []
    spans = apply_bold(spans)
    spans = apply_italic(spans)
    spans = apply_code(spans)
    if highlight_quotes:
        spans = apply_quotes(spans)
    return spans


def format_text(text: str, highlight_quotes: bool = False) -> FormattedText:
    """Format `text` and keep it alongside its spans."""
    return FormattedText(text=text, spans=tuple(format_inline(text, highlight_quotes)))
