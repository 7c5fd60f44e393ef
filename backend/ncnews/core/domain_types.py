"""Domain Types - identity types, limits and the enums shared across layers.

Invariants:
    - ArticleId wraps a positive int; Username wraps str
    - Vote counts and vote deltas fit the 32-bit votes column
    - Every backend failure shape the core understands is a StoreFailure member
    - Every client-facing 400 reason is an ErrorReason member (no raw string matching)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ArticleId = NewType("ArticleId", int)
Username = NewType("Username", str)


# ─── Limits ──────────────────────────────────────────────────────

# Primary keys are 32-bit SERIAL columns
MAX_RESOURCE_ID = 2_147_483_647

# votes is a 32-bit INTEGER column
MIN_VOTES = -2_147_483_648
MAX_VOTES = 2_147_483_647


# ─── Enums ───────────────────────────────────────────────────────

class StoreFailure(str, Enum):
    """Backend failure shapes reported by the query layer."""
    FOREIGN_KEY_VIOLATION = "foreign_key_violation"
    NOT_NULL_VIOLATION = "not_null_violation"
    UNDEFINED_COLUMN = "undefined_column"
    INVALID_TEXT_REPRESENTATION = "invalid_text_representation"
    NUMERIC_OUT_OF_RANGE = "numeric_out_of_range"
    UNKNOWN = "unknown"


class ErrorReason(str, Enum):
    """Why a request was rejected as bad. Each reason has one client message."""
    INVALID_ID = "Invalid id"
    INVALID_COLUMN = "Invalid column value"
    INVALID_KEY = "Invalid key value insert"
