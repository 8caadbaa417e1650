"""Request messages sent by UI surfaces."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ApiRequest(BaseModel):
    """Request to run a single action."""

    model_config = ConfigDict(frozen=True, extra="allow")

    action: str = Field(
        description="Action type identifier"
    )
    content: Optional[str] = Field(
        default=None,
        description="Action payload, e.g. an ASCII-armored key block"
    )
