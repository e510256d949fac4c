"""Rules store router (read-only introspection endpoints)."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.database.dependencies import get_db_session
from src.shared.pagination.pagination import PaginatedResponse, PaginationParams

from .schemas import RuleConsistencyReport, RuleResponse
from .service import RuleService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/validation-rules", tags=["Validation Rules"])


@router.get("", response_model=PaginatedResponse[RuleResponse])
async def list_rules(pagination: PaginationParams = Depends(), session: AsyncSession = Depends(get_db_session)):
    """List the published validation rules, ordered by rule name."""
    rules, total = await RuleService.list_rules(session, pagination)
    return PaginatedResponse[RuleResponse](
        items=[RuleResponse.model_validate(rule) for rule in rules],
        total=total,
        page=pagination.page,
        page_size=pagination.page_size,
    )


@router.get("/consistency", response_model=RuleConsistencyReport)
async def check_consistency(session: AsyncSession = Depends(get_db_session)):
    """Compare the published rules with the rules the validators enforce."""
    return await RuleService.check_consistency(session)


@router.get("/{rule_name}", response_model=RuleResponse)
async def get_rule(rule_name: str, session: AsyncSession = Depends(get_db_session)):
    """Get a single published rule by name."""
    rule = await RuleService.get_rule(session, rule_name)
    return RuleResponse.model_validate(rule)
