"""Shared response schemas."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """
    Confirmation message for operations that return no entity.

    ``timestamp`` is omitted from responses that do not carry one.
    """

    timestamp: Optional[datetime] = Field(None, description="Server time of the operation")
    message: str = Field(..., description="Human-readable result")
