from typing import Any

from pydantic import BaseModel, Field

from agent.models import PlatformResult
from agent.platforms import Tone


class GenerateRequest(BaseModel):
    content: str | None = Field(None, description="Text to repurpose")
    platforms: list[str] | None = Field(None, description="Platform ids or aliases")
    tone: Tone = Field(Tone.PROFESSIONAL, description="Stylistic modifier")


class GenerateResponse(BaseModel):
    success: bool
    data: dict[str, PlatformResult] | None = None
    error: str | None = None


class PlatformInfo(BaseModel):
    id: str
    alias: str | None = None
    name: str
    description: str


def failure(error: str) -> dict[str, Any]:
    return {"success": False, "error": error}
