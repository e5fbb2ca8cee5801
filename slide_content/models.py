"""Data models for slide-content."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar, Union


class SpanKind(Enum):
    """Emphasis applied to a run of inline text.

    Attributes:
        PLAIN: Unstyled text.
        BOLD: Text wrapped in ``**...**``.
        ITALIC: Text wrapped in ``*...*``.
        CODE: Text wrapped in backticks.
        QUOTE: Double-quoted text, only produced when quote highlighting is on.
    """

    PLAIN = auto()
    BOLD = auto()
    ITALIC = auto()
    CODE = auto()
    QUOTE = auto()


@dataclass(frozen=True)
class Span:
    """A run of inline text with a single emphasis."""

    kind: SpanKind
    text: str


@dataclass(frozen=True)
class FormattedText:
    """Item text together with its inline spans.

    Attributes:
        text: Item text as it was accumulated, before inline formatting.
        spans: Spans produced by the inline formatter.
    """

    text: str
    spans: tuple[Span, ...] = ()


@dataclass(frozen=True)
class ListBlock:
    """Bulleted, numbered or checkmarked list, optionally under a section title.

    Attributes:
        title: Text of the ``##``/``###`` header that opened the list, if any.
        items: Formatted list items, never empty.
        ordered: True when every item came from a numbered line.
    """

    kind: ClassVar[str] = "list"

    title: str | None
    items: tuple[FormattedText, ...]
    ordered: bool = False

    @property
    def texts(self) -> list[str]:
        return [item.text for item in self.items]


@dataclass(frozen=True)
class ParagraphsBlock:
    """Consecutive plain-text lines, one paragraph per line."""

    kind: ClassVar[str] = "paragraphs"

    items: tuple[FormattedText, ...]

    @property
    def texts(self) -> list[str]:
        return [item.text for item in self.items]


@dataclass(frozen=True)
class CodeBlock:
    """Fenced code, verbatim apart from trailing whitespace."""

    kind: ClassVar[str] = "code"

    text: str


@dataclass(frozen=True)
class TableBlock:
    """Pipe table split into its header row and body rows."""

    kind: ClassVar[str] = "table"

    header: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...] = ()


@dataclass(frozen=True)
class ImageBlock:
    """Standalone ``![alt](src)`` line."""

    kind: ClassVar[str] = "image"

    alt: str
    src: str


@dataclass(frozen=True)
class FlowBlock:
    """Arrow line such as ``Prompt -> Model -> Image`` with arrows normalized."""

    kind: ClassVar[str] = "flow"

    text: str


ContentBlock = Union[ListBlock, ParagraphsBlock, CodeBlock, TableBlock, ImageBlock, FlowBlock]


class SectionKind(Enum):
    """Kinds of section that accumulate lines until flushed.

    Attributes:
        LIST: List items, optionally opened by a section header.
        TEXT: Plain-text paragraphs.
    """

    LIST = auto()
    TEXT = auto()


@dataclass
class Section:
    """Open list or text section collecting items.

    Attributes:
        kind: Whether the section becomes a list or a paragraph block.
        title: Header text for titled lists; None otherwise.
        items: Raw item texts collected so far.
        ordered: Whether all collected items came from numbered lines; None
            until the first item arrives.
    """

    kind: SectionKind
    title: str | None = None
    items: list[str] = field(default_factory=list)
    ordered: bool | None = None


@dataclass
class ParserContext:
    """Encapsulate parser state while walking a slide body.

    The open section, the code fence and the table are independent slots: a
    fence may open while a table is pending, and neither flushes the other.

    Attributes:
        section: Section currently accumulating items, if any.
        in_code_block: Whether the scan is between an opening and closing fence.
        code_lines: Lines collected inside the current fence.
        in_table: Whether a table run has started and not been emitted.
        table_rows: Cell rows collected for the current table run.
    """

    section: Section | None = None
    in_code_block: bool = False
    code_lines: list[str] = field(default_factory=list)
    in_table: bool = False
    table_rows: list[list[str]] = field(default_factory=list)
