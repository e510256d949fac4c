"""Pagination utilities and models for API responses."""

from pydantic import BaseModel, Field, computed_field


class PaginationParams(BaseModel):
    """Query parameters for pagination.

    Can be used as dependency in FastAPI routes:
    ```python
    @router.get("/validation-rules")
    async def list_rules(pagination: PaginationParams = Depends()):
        stmt = select(ValidationRule).offset(pagination.skip).limit(pagination.limit)
    ```
    """

    page: int | None = Field(default=1, ge=1, description="Page number (1-indexed). Set to None to disable pagination")

    page_size: int | None = Field(
        default=50, ge=1, le=1000, description="Items per page. Set to None to disable pagination"
    )

    @property
    def skip(self) -> int:
        """Calculate offset for database query."""
        if not self.is_paginated:
            return 0
        assert self.page is not None and self.page_size is not None
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int | None:
        """Calculate limit for database query (None = no limit)."""
        return self.page_size if self.is_paginated else None

    @property
    def is_paginated(self) -> bool:
        """Check if pagination is enabled."""
        return self.page is not None and self.page_size is not None


class PaginatedResponse[T](BaseModel):
    """Generic paginated response model.

    Page counters are serialized alongside the items so clients do not
    have to compute them.
    """

    items: list[T]
    total: int
    page: int | None = None
    page_size: int | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_pages(self) -> int | None:
        """Total pages, or None if not paginated."""
        if self.page is None or self.page_size is None:
            return None
        return (self.total + self.page_size - 1) // self.page_size

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_next(self) -> bool:
        """Check if there's a next page."""
        if self.page is None or self.total_pages is None:
            return False
        return self.page < self.total_pages


__all__ = ["PaginatedResponse", "PaginationParams"]
