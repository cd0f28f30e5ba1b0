from .models import ChatEntry, EntryRole, TriggerState, UploadedAsset
from .source import guess_mime_type, load_asset
from .state import ConversationState, LifecyclePhase

__all__ = [
    "ChatEntry",
    "ConversationState",
    "EntryRole",
    "LifecyclePhase",
    "TriggerState",
    "UploadedAsset",
    "guess_mime_type",
    "load_asset",
]
