"""Substitution rules for the reply markdown subset.

Order matters: a later rule must never see markup produced by an earlier
one as source syntax. Headings run before bold so the heading marker is
consumed first, bullets run after bold so `* **Purpose:** ...` still
becomes a single item, and line breaks run last.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from ..config import HEADING_CLASS, LINK_CLASS, LIST_ITEM_CLASS


@dataclass(frozen=True)
class FormatRule:
    """A single pattern -> replacement step."""

    name: str
    pattern: re.Pattern[str]
    replacement: str | Callable[[re.Match[str]], str]

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


# The line break stays in place so the next line is still anchored at ^;
# LINE_BREAK drops it once the line-based rules have run.
HEADING = FormatRule(
    name="heading",
    pattern=re.compile(r"^### (.*?)(?=\r?\n)", re.MULTILINE),
    replacement=rf'<h3 class="{HEADING_CLASS}">\1</h3>',
)

BOLD = FormatRule(
    name="bold",
    pattern=re.compile(r"\*\*(.*?)\*\*"),
    replacement=r"<strong>\1</strong>",
)

# No enclosing <ul>: items are emitted bare, display styling relies on it
LIST_ITEM = FormatRule(
    name="list_item",
    pattern=re.compile(r"^\* ([^\r\n]*)", re.MULTILINE),
    replacement=rf'<li class="{LIST_ITEM_CLASS}">\1</li>',
)

# Only http(s) targets become anchors; any other link stays literal text
LINK = FormatRule(
    name="link",
    pattern=re.compile(r"\[([^\]]*)\]\(((?i:https?)://.*?)\)"),
    replacement=(
        r'<a href="\2" target="_blank" rel="noopener noreferrer" '
        rf'class="{LINK_CLASS}">\1</a>'
    ),
)


def _line_break(match: re.Match[str]) -> str:
    # A break that ends a heading line belongs to the heading block.
    # Input is escaped first, so </h3> here always comes from HEADING.
    return match.group(1) or "<br>"


LINE_BREAK = FormatRule(
    name="line_break",
    pattern=re.compile(r"(</h3>)?(?:\r\n|\r|\n)"),
    replacement=_line_break,
)

DEFAULT_RULES: tuple[FormatRule, ...] = (HEADING, BOLD, LIST_ITEM, LINK, LINE_BREAK)
