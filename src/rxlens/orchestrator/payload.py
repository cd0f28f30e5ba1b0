import base64
import binascii

from ..conversation import UploadedAsset
from ..errors import EncodingError
from ..transport import RequestPayload


def encode_asset(asset: UploadedAsset) -> str:
    """Base64-encode asset content for the request body.

    Raises:
        EncodingError: If the content is empty or cannot be encoded
    """
    if not asset.content:
        raise EncodingError(f"Asset '{asset.name}' has no content")
    try:
        return base64.b64encode(asset.content).decode("ascii")
    except (binascii.Error, TypeError, ValueError) as e:
        raise EncodingError(f"Could not encode asset '{asset.name}': {e}") from e


def build_payload(asset: UploadedAsset, instruction: str) -> RequestPayload:
    """Combine the instruction and the encoded asset into a request payload."""
    if not asset.mime_type:
        raise EncodingError(f"Asset '{asset.name}' has no MIME type")
    return RequestPayload(
        instruction=instruction,
        mime_type=asset.mime_type,
        data=encode_asset(asset),
    )
