"""Display collaborators for the orchestrator.

Module structure:
- base.py: Interfaces (display sink, busy indicator)
- memory.py: In-memory log and indicator
- console.py: Rich console output for the CLI
- html.py: Standalone HTML page of a conversation
"""

from .base import BusyIndicator, CompositeDisplay, DisplaySink
from .console import ConsoleDisplay, ConsoleStatusIndicator
from .html import render_chat_html
from .memory import ConversationLog, RecordingIndicator

__all__ = [
    "BusyIndicator",
    "CompositeDisplay",
    "ConsoleDisplay",
    "ConsoleStatusIndicator",
    "ConversationLog",
    "DisplaySink",
    "RecordingIndicator",
    "render_chat_html",
]
