"""FastAPI dependency injection for engine services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from shadesail.domain.services.pricing import DEFAULT_RATE_TABLE, RateTable


@lru_cache(maxsize=1)
def get_rate_table() -> RateTable:
    """Rate table used when a request does not override it."""
    return DEFAULT_RATE_TABLE


# Type aliases for cleaner endpoint signatures
RateTableDep = Annotated[RateTable, Depends(get_rate_table)]
