"""Pydantic schemas for Slack incoming-webhook messages."""

from typing import Optional

from pydantic import BaseModel, Field


class SlackField(BaseModel):
    value: str
    short: bool = False


class SlackAttachment(BaseModel):
    fallback: str
    color: str
    title: str = Field(..., description="Quality gate status: GREEN, WARN or ERROR")
    text: str = Field(..., description="Human readable status text")
    fields: list[SlackField] = Field(default_factory=list)


class SlackMessage(BaseModel):
    channel: Optional[str] = None
    username: str
    text: str
    attachments: list[SlackAttachment] = Field(default_factory=list)
