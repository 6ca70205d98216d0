"""Decision API endpoints"""

import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from lifeos.db import get_db
from lifeos.middleware.auth import get_current_user_id
from lifeos.features.decision.repository import DecisionRepository
from lifeos.features.decision.service import DecisionService
from lifeos.features.decision.schemas import DecisionData, DecisionResponse

logger = logging.getLogger(__name__)


router = APIRouter(prefix="/api/decision", tags=["decision"])


def get_decision_repository(db: AsyncSession = Depends(get_db)) -> DecisionRepository:
    return DecisionRepository(db)


def get_decision_service(
    repository: DecisionRepository = Depends(get_decision_repository),
) -> DecisionService:
    return DecisionService(repository)


@router.get("/next")
async def get_next_recommendation(
    user_id: str = Depends(get_current_user_id),
    service: DecisionService = Depends(get_decision_service),
) -> dict:
    """
    Recommend the single best next task for the authenticated user.

    Uses today's daily context (defaults when none is recorded), ACTIVE goals
    and PENDING tasks.

    Returns:
        {"ok": true, "data": {"recommendation", "message"?, "inputs"}}

    Raises:
        401: Missing or invalid bearer token
        500: Store or engine failure (reported as "internal_error")
    """
    try:
        decision = await service.get_next_recommendation(user_id)
    except Exception as e:
        logger.error(f"Failed to generate recommendation for user {user_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="internal_error")

    response = DecisionResponse(
        data=DecisionData(
            recommendation=decision.recommendation,
            message=decision.message,
            inputs=decision.inputs,
        )
    )
    return response.to_json()
