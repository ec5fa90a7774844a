"""
Common response models.

Generic message schema shared by every mutation route.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Success body for mutations."""

    message: str = Field(description="Outcome of the mutation")

