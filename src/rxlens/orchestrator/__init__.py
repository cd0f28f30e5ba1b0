from .orchestrator import RequestOrchestrator
from .payload import build_payload, encode_asset

__all__ = ["RequestOrchestrator", "build_payload", "encode_asset"]
