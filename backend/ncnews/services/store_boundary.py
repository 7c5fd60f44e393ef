"""Store Boundary - awaits a query layer call and translates its rejections.

Invariants:
    - StoreRejection never escapes: it becomes the NcNewsError from the lookup table
    - Results pass through unchanged
"""

import logging
from typing import Awaitable, TypeVar

from ncnews.core.errors import StoreRejection
from ncnews.core.translate_store_failure import translate_store_failure

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def call_store(query: Awaitable[T]) -> T:
    """Await a store call; map StoreRejection to a client-facing error."""
    try:
        return await query
    except StoreRejection as e:
        error = translate_store_failure(e.failure)
        logger.warning(
            f"{e.operation} failed: {error.message}",
            extra={"error_code": error.code, "store_failure": e.failure.value},
        )
        raise error from e
