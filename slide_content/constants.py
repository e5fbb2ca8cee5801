"""Constants used across the slide-content package."""

from __future__ import annotations

import re

# Line prefixes
TITLE_PREFIX = "# "
CODE_FENCE = "```"
TABLE_PREFIX = "|"
HEADER_PREFIXES = ("## ", "### ")
BULLET_PREFIXES = ("- ", "✅ ", "❌ ")
DONE_MARKER = "✅"
NOT_DONE_MARKER = "❌"

# Line patterns
NUMBERED_ITEM_PATTERN = re.compile(r"^[0-9]+\.\s")
BULLET_ITEM_PATTERN = re.compile(r"^[-✅❌]\s")
SEPARATOR_CELL_PATTERN = re.compile(r"[-:]+")
SEPARATOR_ROW_PATTERN = re.compile(r"\|[-:\s|]+\|")
IMAGE_LINE_PATTERN = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")
FLOW_ARROWS = ("-->", "->")
FLOW_ARROW_REPLACEMENT = "  →  "

# Inline patterns, applied in this order
BOLD_PATTERN = re.compile(r"\*\*(.+?)\*\*")
ITALIC_PATTERN = re.compile(r"\*(.+?)\*")
INLINE_CODE_PATTERN = re.compile(r"`(.+?)`")
QUOTE_PATTERN = re.compile(r'"([^"]+)"')

# Files
SLIDE_EXTENSIONS = (".md", ".markdown", ".txt")
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
