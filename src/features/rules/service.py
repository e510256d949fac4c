"""Rules store service layer."""

import logging

from sqlalchemy import func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.pagination.pagination import PaginationParams
from src.shared.validators.rules import DEFAULT_RULES, RULES_BY_NAME

from .exceptions import RuleNotFound
from .models import ValidationRule
from .schemas import RuleConsistencyReport, RuleMismatch

logger = logging.getLogger(__name__)

# Dialect-specific INSERT constructs that support ON CONFLICT DO NOTHING
INSERT_BY_DIALECT = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class RuleService:
    """Service for rules store operations."""

    @staticmethod
    async def list_rules(session: AsyncSession, pagination: PaginationParams) -> tuple[list[ValidationRule], int]:
        """List stored rules ordered by rule name.

        Args:
            session: Database session
            pagination: Page parameters (pagination disabled when page or page_size is None)

        Returns:
            Tuple of (rules for the requested page, total rule count)

        """
        total = await session.scalar(select(func.count()).select_from(ValidationRule)) or 0

        stmt = select(ValidationRule).order_by(ValidationRule.rule_name)
        if pagination.is_paginated:
            stmt = stmt.offset(pagination.skip).limit(pagination.limit)

        result = await session.execute(stmt)
        return list(result.scalars().all()), total

    @staticmethod
    async def get_rule(session: AsyncSession, rule_name: str) -> ValidationRule:
        """Get a stored rule by name.

        Raises:
            RuleNotFound: If no row has this rule name

        """
        stmt = select(ValidationRule).where(ValidationRule.rule_name == rule_name)
        result = await session.execute(stmt)
        rule = result.scalar_one_or_none()
        if rule is None:
            raise RuleNotFound(rule_name)
        return rule

    @staticmethod
    async def seed_default_rules(session: AsyncSession) -> int:
        """Insert built-in rules missing from the store.

        Runs as a single ``INSERT ... ON CONFLICT (rule_name) DO NOTHING``, so
        concurrent seeders (several workers starting at once) never collide
        and existing rows are never overwritten.

        Returns:
            Number of rules inserted

        """
        dialect = session.get_bind().dialect.name
        insert = INSERT_BY_DIALECT.get(dialect)
        if insert is None:
            raise RuntimeError(f"Rule seeding is not supported on the '{dialect}' dialect")

        stmt = (
            insert(ValidationRule)
            .values(
                [
                    {
                        "rule_name": rule.rule_name.value,
                        "regex_pattern": rule.regex_pattern,
                        "error_message": rule.error_message,
                    }
                    for rule in DEFAULT_RULES
                ]
            )
            .on_conflict_do_nothing(index_elements=[ValidationRule.rule_name])
        )
        result = await session.execute(stmt)
        inserted = max(result.rowcount, 0)

        if inserted:
            logger.info(f"Seeded {inserted} validation rule(s)")
        return inserted

    @staticmethod
    async def check_consistency(session: AsyncSession) -> RuleConsistencyReport:
        """Compare stored rules with the built-in rule table."""
        result = await session.execute(select(ValidationRule).order_by(ValidationRule.rule_name))
        stored = {rule.rule_name: rule for rule in result.scalars().all()}

        report = RuleConsistencyReport(
            missing=[rule.rule_name.value for rule in DEFAULT_RULES if rule.rule_name.value not in stored],
            unknown=[name for name in stored if name not in RULES_BY_NAME],
        )

        for name, row in stored.items():
            expected = RULES_BY_NAME.get(name)
            if expected is None:
                continue
            if row.regex_pattern != expected.regex_pattern or row.error_message != expected.error_message:
                report.mismatched.append(
                    RuleMismatch(
                        rule_name=name,
                        expected_pattern=expected.regex_pattern,
                        stored_pattern=row.regex_pattern,
                        expected_message=expected.error_message,
                        stored_message=row.error_message,
                    )
                )

        if not report.consistent:
            logger.warning(
                f"Rules store drift: missing={report.missing} "
                f"mismatched={[m.rule_name for m in report.mismatched]} unknown={report.unknown}"
            )
        return report
