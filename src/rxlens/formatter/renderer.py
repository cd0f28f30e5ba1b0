"""Reply renderer.

Hides how model replies become display markup: the input is escaped,
then passed through an ordered list of substitution rules.
"""

import html
from collections.abc import Iterable

from .rules import DEFAULT_RULES, FormatRule


def render(model_reply: str, rules: Iterable[FormatRule] = DEFAULT_RULES) -> str:
    """Convert a model reply written in the markdown subset to markup.

    Total over any text: patterns that do not match are left as literal
    text, and the empty string renders to the empty string.

    Args:
        model_reply: Raw reply text from the inference API
        rules: Substitution rules applied in order

    Returns:
        Markup fragment ready to place in an assistant chat bubble
    """
    # Escaping never touches the rule delimiters (#, *, [, ], (, ), newlines)
    text = html.escape(model_reply, quote=True)
    for rule in rules:
        text = rule.apply(text)
    return text
