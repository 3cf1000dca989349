from __future__ import annotations

from pydantic import BaseModel, Field


class MoveRequest(BaseModel):
    fromX: int = Field(..., description="Column of the piece to move.")
    fromY: int = Field(..., description="Row of the piece to move.")
    toX: int = Field(..., description="Destination column.")
    toY: int = Field(..., description="Destination row.")
