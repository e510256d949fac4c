"""Validation rule models (rules-description store)."""

from sqlalchemy import BigInteger, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.database.base import Base, TimestampMixin


class ValidationRule(Base, TimestampMixin):
    """Published description of a built-in validation rule.

    Read-only from the validators' point of view: rows exist for
    introspection and auditing and are never consulted at validation time.
    """

    __tablename__ = "validation_rules"

    # Primary key (BIGSERIAL on PostgreSQL, INTEGER rowid on SQLite)
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )

    rule_name: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    regex_pattern: Mapped[str] = mapped_column(Text, nullable=False)
    error_message: Mapped[str] = mapped_column(String(255), nullable=False)
