from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..catalog.models import Property


class Recommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    property: Property
    score: float = Field(..., ge=0.0, le=1.0)
    reasons: tuple[str, ...] = ()
