"""Confirmation message DTO."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Plain confirmation returned by update and delete endpoints."""

    message: str
