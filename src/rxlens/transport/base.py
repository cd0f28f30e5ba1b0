from abc import ABC, abstractmethod
from typing import Any

from .models import RequestPayload


class Transport(ABC):
    """Abstract base class for the inference API call.

    This module hides the design decision of how the request reaches the
    model. Implementations must handle:
    - Client setup and authentication
    - Conversion of the payload to the provider's request format
    - Mapping provider failures to TransportError

    Implementations make exactly one attempt per send; there is no retry.

    Supports async context manager protocol for proper resource cleanup:
        async with transport:
            envelope = await transport.send(payload)
    """

    @abstractmethod
    async def send(self, payload: RequestPayload) -> dict[str, Any]:
        """Send one conversion request.

        Args:
            payload: Instruction and encoded image

        Returns:
            The response envelope as a JSON-shaped dict

        Raises:
            TransportError: Non-success status or network failure
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    async def __aenter__(self) -> "Transport":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors raised by httpx
        during interpreter shutdown.
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
