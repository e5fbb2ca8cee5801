"""
slide-content: structured content blocks from authored slide bodies.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    slide-content slides/intro.md --format markup

Library Usage:
    from slide_content import parse_content, render_json

    blocks = parse_content("## Steps\\n1. **Write** a prompt\\n2. Generate")
    print(render_json(blocks))
"""

from .config import ConfigError, RenderConfig
from .exceptions import ContentFileError, FileTooLargeError
from .export import block_to_dict, blocks_to_dicts, render_json, render_markup
from .inline import format_inline, format_text
from .models import (
    CodeBlock,
    ContentBlock,
    FlowBlock,
    FormattedText,
    ImageBlock,
    ListBlock,
    ParagraphsBlock,
    Span,
    SpanKind,
    TableBlock,
)
from .parser import parse_content, parse_file

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "parse_content",
    "parse_file",
    "format_inline",
    "format_text",
    # Data models
    "ContentBlock",
    "ListBlock",
    "ParagraphsBlock",
    "CodeBlock",
    "TableBlock",
    "ImageBlock",
    "FlowBlock",
    "FormattedText",
    "Span",
    "SpanKind",
    # Serialization
    "block_to_dict",
    "blocks_to_dicts",
    "render_json",
    "render_markup",
    # Configuration
    "RenderConfig",
    # Exceptions
    "ConfigError",
    "ContentFileError",
    "FileTooLargeError",
    # Version
    "__version__",
]
