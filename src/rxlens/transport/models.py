from pydantic import BaseModel, ConfigDict, Field


class RequestPayload(BaseModel):
    """One conversion request: the instruction plus the encoded image.

    Built fresh for every request and never stored.
    """

    model_config = ConfigDict(frozen=True)

    instruction: str = Field(description="Fixed instruction text sent ahead of the image")
    mime_type: str = Field(description="MIME type of the image")
    data: str = Field(description="Base64-encoded image content", repr=False)
