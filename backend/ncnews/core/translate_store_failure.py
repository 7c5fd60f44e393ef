"""Store Failure Translation - maps backend failure shapes to client-facing errors.

Invariants:
    - PURE: a lookup from StoreFailure to an error, no IO
    - Every StoreFailure member has exactly one entry; UNKNOWN is always a fault
    - Never returns a success value: translation only ever produces an error
"""

from typing import Callable

from ncnews.core.domain_types import ErrorReason, StoreFailure
from ncnews.core.errors import (
    BadRequestError, ErrorContext, NcNewsError, StoreFaultError,
)


def _bad_request(reason: ErrorReason) -> Callable[[StoreFailure], NcNewsError]:
    return lambda failure: BadRequestError(reason, ErrorContext())


STORE_FAILURE_ERRORS: dict[StoreFailure, Callable[[StoreFailure], NcNewsError]] = {
    StoreFailure.FOREIGN_KEY_VIOLATION: _bad_request(ErrorReason.INVALID_KEY),
    StoreFailure.NOT_NULL_VIOLATION: _bad_request(ErrorReason.INVALID_COLUMN),
    StoreFailure.UNDEFINED_COLUMN: _bad_request(ErrorReason.INVALID_COLUMN),
    StoreFailure.INVALID_TEXT_REPRESENTATION: _bad_request(ErrorReason.INVALID_ID),
    StoreFailure.NUMERIC_OUT_OF_RANGE: _bad_request(ErrorReason.INVALID_COLUMN),
    StoreFailure.UNKNOWN: StoreFaultError,
}


def translate_store_failure(failure: StoreFailure) -> NcNewsError:
    """Return the client-facing error for a backend failure shape."""
    return STORE_FAILURE_ERRORS[failure](failure)
