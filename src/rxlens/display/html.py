"""Standalone HTML rendering of a conversation log.

Hides the chat bubble layout: user bubbles show the uploaded image as a
data URL, assistant bubbles embed the formatter markup unchanged.
"""

import base64
import html
from collections.abc import Iterable

from ..conversation import ChatEntry, EntryRole, UploadedAsset

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
<script src="https://cdn.tailwindcss.com"></script>
</head>
<body class="bg-gray-900 text-gray-100">
<main id="chat-container" class="max-w-3xl mx-auto p-4 space-y-4">
{bubbles}
</main>
</body>
</html>
"""

USER_BUBBLE = """<div class="flex justify-end">
    <div class="chat-bubble-user bg-blue-500 text-white p-2 rounded-lg rounded-br-none">
        <p class="text-sm font-medium mb-2">{label}</p>
        <img src="{src}" alt="Uploaded Prescription" class="rounded-md max-w-xs h-auto"/>
    </div>
</div>"""

ASSISTANT_BUBBLE = """<div class="flex justify-start">
    <div class="chat-bubble-ai bg-gray-700 text-white p-4 rounded-lg rounded-bl-none">
        {content}
    </div>
</div>"""


def to_data_url(asset: UploadedAsset) -> str:
    """Encode an asset as a data URL for inline display."""
    encoded = base64.b64encode(asset.content).decode("ascii")
    return f"data:{html.escape(asset.mime_type, quote=True)};base64,{encoded}"


def render_entry(entry: ChatEntry) -> str:
    """Render a single chat entry as a bubble."""
    if entry.role == EntryRole.USER and entry.asset is not None:
        return USER_BUBBLE.format(
            label=html.escape(entry.content),
            src=to_data_url(entry.asset),
        )
    return ASSISTANT_BUBBLE.format(content=entry.content)


def render_chat_html(entries: Iterable[ChatEntry], title: str = "Prescription Helper") -> str:
    """Render a full conversation as a standalone HTML page.

    Args:
        entries: Conversation log in append order
        title: Page title

    Returns:
        HTML document text
    """
    bubbles = "\n".join(render_entry(entry) for entry in entries)
    return PAGE_TEMPLATE.format(title=html.escape(title), bubbles=bubbles)
