from .base import Transport
from .envelope import extract_reply_text
from .factory import create_transport
from .models import RequestPayload
from .providers import GeminiTransport

__all__ = [
    "GeminiTransport",
    "RequestPayload",
    "Transport",
    "create_transport",
    "extract_reply_text",
]
