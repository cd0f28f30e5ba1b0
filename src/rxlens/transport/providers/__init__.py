from .gemini import GeminiTransport

__all__ = ["GeminiTransport"]
