"""Data models for the conversation.

Hides the representation of uploaded images, chat entries and trigger state.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..config import ERROR_CLASS, ERROR_MESSAGE


class EntryRole(str, Enum):
    """Who a chat entry belongs to."""

    USER = "user"
    ASSISTANT = "assistant"


class UploadedAsset(BaseModel):
    """The prescription image currently selected by the user."""

    model_config = ConfigDict(frozen=True)

    content: bytes = Field(description="Raw image bytes", repr=False)
    mime_type: str = Field(description="MIME type, e.g. 'image/jpeg'")
    name: str = Field(description="Display name, usually the file name")

    @property
    def size(self) -> int:
        """Size of the image in bytes."""
        return len(self.content)


class ChatEntry(BaseModel):
    """A rendered unit of the conversation log.

    User entries carry the uploaded image, assistant entries carry
    formatted markup (or the fixed error message).
    """

    model_config = ConfigDict(frozen=True)

    role: EntryRole
    content: str = Field(default="", description="Markup shown in the bubble")
    asset: UploadedAsset | None = Field(default=None, description="Image for user entries")
    is_error: bool = Field(default=False, description="True for the failure message")
    timestamp: datetime = Field(default_factory=datetime.now)

    @classmethod
    def from_user(cls, asset: UploadedAsset) -> "ChatEntry":
        return cls(role=EntryRole.USER, content="You uploaded:", asset=asset)

    @classmethod
    def from_assistant(cls, markup: str) -> "ChatEntry":
        return cls(role=EntryRole.ASSISTANT, content=markup)

    @classmethod
    def failure(cls) -> "ChatEntry":
        """The fixed, non-technical message shown on every error path."""
        return cls(
            role=EntryRole.ASSISTANT,
            content=f'<p class="{ERROR_CLASS}">{ERROR_MESSAGE}</p>',
            is_error=True,
        )


class TriggerState(BaseModel):
    """What the busy indicator should show."""

    model_config = ConfigDict(frozen=True)

    loading: bool
    upload_enabled: bool
    submit_enabled: bool
