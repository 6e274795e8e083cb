"""Pydantic schema for the ping endpoint."""

from pydantic import BaseModel, Field


class PingResponse(BaseModel):
    message: str = Field(min_length=1)
