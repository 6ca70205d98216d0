"""Response schemas for the Decision feature"""

from typing import Optional
from pydantic import BaseModel, ConfigDict

from lifeos.features.decision.domain import DecisionInputs, Recommendation


class DecisionData(BaseModel):
    """Payload of GET /api/decision/next"""
    model_config = ConfigDict(populate_by_name=True)

    recommendation: Optional[Recommendation] = None
    message: Optional[str] = None
    inputs: DecisionInputs


class DecisionResponse(BaseModel):
    """Success envelope"""
    ok: bool = True
    data: DecisionData

    def to_json(self) -> dict:
        """Serialize with camelCase keys, omitting a null message."""
        payload = self.model_dump(mode="json", by_alias=True)
        if payload["data"]["message"] is None:
            del payload["data"]["message"]
        return payload
