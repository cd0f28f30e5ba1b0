"""Google Gemini transport implementation.

Uses the official Google GenAI SDK for the generateContent call.
Reference: https://github.com/googleapis/python-genai
"""

import base64
import binascii
import logging
from typing import Any

import httpx
from google import genai
from google.genai import errors, types

from ...config import DEFAULT_MODEL
from ...errors import EncodingError, TransportError
from ..base import Transport
from ..models import RequestPayload

logger = logging.getLogger(__name__)

# Relaxed safety settings: medication names and side effects trip the defaults
DEFAULT_SAFETY_SETTINGS = [
    types.SafetySetting(category="HARM_CATEGORY_HARASSMENT", threshold="BLOCK_ONLY_HIGH"),
    types.SafetySetting(category="HARM_CATEGORY_HATE_SPEECH", threshold="BLOCK_ONLY_HIGH"),
    types.SafetySetting(category="HARM_CATEGORY_SEXUALLY_EXPLICIT", threshold="BLOCK_ONLY_HIGH"),
    types.SafetySetting(category="HARM_CATEGORY_DANGEROUS_CONTENT", threshold="BLOCK_ONLY_HIGH"),
]


class GeminiTransport(Transport):
    """Google Gemini transport.

    Hidden design decisions:
    - Google GenAI client initialization
    - Payload conversion to SDK content objects
    - Mapping SDK and httpx failures to TransportError
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        **client_kwargs: Any
    ):
        """Initialize Gemini transport.

        Args:
            api_key: Google AI API key
            model: Multimodal model to call (gemini-2.5-flash, gemini-2.5-pro)
            **client_kwargs: Additional kwargs for Client
        """
        self._model = model
        self._client = genai.Client(api_key=api_key, **client_kwargs)

    @property
    def model(self) -> str:
        """Get the model name."""
        return self._model

    def _convert_payload(self, payload: RequestPayload) -> list[types.Content]:
        """Convert the payload to a single user turn of text and image parts."""
        # The SDK takes raw bytes and does its own base64 on the wire
        try:
            image_bytes = base64.b64decode(payload.data, validate=True)
        except (binascii.Error, ValueError) as e:
            raise EncodingError(f"Payload image is not valid base64: {e}") from e

        return [types.Content(
            role="user",
            parts=[
                types.Part(text=payload.instruction),
                types.Part(inline_data=types.Blob(mime_type=payload.mime_type, data=image_bytes)),
            ]
        )]

    async def send(self, payload: RequestPayload) -> dict[str, Any]:
        """Send one generateContent request to Gemini.

        Args:
            payload: Instruction and encoded image

        Returns:
            Response envelope as a dict with a 'candidates' list

        Raises:
            TransportError: API error status or network failure
            EncodingError: Payload image data could not be decoded
        """
        contents = self._convert_payload(payload)
        config = types.GenerateContentConfig(safety_settings=DEFAULT_SAFETY_SETTINGS)

        logger.debug("Sending %s image (%d base64 chars) to %s",
                     payload.mime_type, len(payload.data), self._model)
        try:
            response = await self._client.aio.models.generate_content(
                model=self._model,
                contents=contents,
                config=config
            )
        except errors.APIError as e:
            raise TransportError(e.message or str(e), status_code=e.code) from e
        except httpx.HTTPError as e:
            raise TransportError(f"Network error: {e}") from e

        return response.model_dump(mode="json", exclude_none=True)

    async def close(self) -> None:
        """Close the Gemini client.

        Note: The Google GenAI client doesn't require explicit closing,
        but we implement this for interface consistency.
        """
        pass
