"""Notification-related Pydantic models"""
from pydantic import BaseModel, ConfigDict, Field


class Notification(BaseModel):
    """User-visible toast message"""
    model_config = ConfigDict(frozen=True)

    kind: str = Field(..., pattern="^(success|error)$")
    text: str

    @classmethod
    def success(cls, text: str) -> "Notification":
        return cls(kind="success", text=text)

    @classmethod
    def error(cls, text: str) -> "Notification":
        return cls(kind="error", text=text)
