"""Response envelope interpretation.

Hides the shape of a generateContent response: the reply text lives in
candidates[0].content.parts[0].text and anything else is malformed.
"""

from typing import Any

from ..errors import MalformedReplyError


def extract_reply_text(envelope: Any) -> str:
    """Pull the reply text out of a response envelope.

    Args:
        envelope: Decoded JSON response

    Returns:
        Non-empty reply text

    Raises:
        MalformedReplyError: If any level of the expected shape is missing
    """
    try:
        text = envelope["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise MalformedReplyError(f"No valid response from API: {e!r}") from e

    if not isinstance(text, str) or not text:
        raise MalformedReplyError(f"Empty or non-text reply field: {text!r}")
    return text
