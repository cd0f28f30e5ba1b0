"""Markdown-subset formatter for model replies.

Supports headings (###), bold, bullet items, links and line breaks.
"""

from .renderer import render
from .rules import DEFAULT_RULES, FormatRule

__all__ = ["DEFAULT_RULES", "FormatRule", "render"]
