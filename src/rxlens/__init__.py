"""
rxlens: read handwritten prescriptions with a multimodal model.

An uploaded prescription image is sent to the inference API and the
markdown reply is rendered as chat markup. Each module hides one design
decision: reply formatting, conversation state, the transport, the display
collaborators and the request lifecycle.
"""

__version__ = "0.1.0"

from .conversation import ChatEntry, ConversationState, EntryRole, UploadedAsset, load_asset
from .display import ConversationLog, DisplaySink
from .errors import EncodingError, MalformedReplyError, RxLensError, TransportError
from .formatter import render
from .orchestrator import RequestOrchestrator
from .transport import GeminiTransport, RequestPayload, Transport, create_transport

__all__ = [
    "ChatEntry",
    "ConversationLog",
    "ConversationState",
    "DisplaySink",
    "EncodingError",
    "EntryRole",
    "GeminiTransport",
    "MalformedReplyError",
    "RequestOrchestrator",
    "RequestPayload",
    "RxLensError",
    "Transport",
    "TransportError",
    "UploadedAsset",
    "create_transport",
    "load_asset",
    "render",
]
