"""Request Validation - pure contract checks for path parameters and request bodies.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return the parsed value on success, raise BadRequestError on violation
    - Each body contract is a fixed set of field names with a typed parser per field;
      any key outside the set, or any missing key, is rejected before a query is issued
"""

from dataclasses import dataclass

from ncnews.core.domain_types import (
    MAX_RESOURCE_ID, MAX_VOTES, MIN_VOTES, ArticleId, ErrorReason, Username,
)
from ncnews.core.errors import BadRequestError, ErrorContext


@dataclass(frozen=True)
class NewComment:
    """Validated POST /api/articles/{article_id}/comments body."""
    author: Username
    body: str


@dataclass(frozen=True)
class VoteChange:
    """Validated PATCH /api/articles/{article_id} body."""
    inc_votes: int


COMMENT_FIELDS = frozenset({"author", "body"})
VOTE_FIELDS = frozenset({"inc_votes"})


def parse_resource_id(raw: str, field_name: str = "article_id") -> ArticleId:
    """Parse a *_id path parameter. Digits only, within the key column's range."""
    # str.isdigit() accepts unicode digits like "²"; ids are ASCII only
    if not (raw.isascii() and raw.isdigit()):
        raise _bad(ErrorReason.INVALID_ID, field_name)
    value = int(raw)
    if value > MAX_RESOURCE_ID:
        raise _bad(ErrorReason.INVALID_ID, field_name)
    return ArticleId(value)


def parse_new_comment(payload: object) -> NewComment:
    """Check the comment body contract: exactly author + body, both non-empty strings."""
    fields = _require_exact_fields(payload, COMMENT_FIELDS)
    author = _require_text(fields, "author")
    body = _require_text(fields, "body")
    return NewComment(author=Username(author), body=body)


def parse_vote_change(payload: object) -> VoteChange:
    """Check the vote body contract: exactly inc_votes, a JSON integer in column range."""
    fields = _require_exact_fields(payload, VOTE_FIELDS)
    inc_votes = fields["inc_votes"]
    # bool is an int subclass; JSON true must not count as +1
    if isinstance(inc_votes, bool) or not isinstance(inc_votes, int):
        raise _bad(ErrorReason.INVALID_COLUMN, "inc_votes")
    if not MIN_VOTES <= inc_votes <= MAX_VOTES:
        raise _bad(ErrorReason.INVALID_COLUMN, "inc_votes")
    return VoteChange(inc_votes=inc_votes)


def _require_exact_fields(payload: object, expected: frozenset[str]) -> dict:
    if not isinstance(payload, dict):
        raise _bad(ErrorReason.INVALID_COLUMN)
    unexpected = set(payload) - expected
    missing = expected - set(payload)
    if unexpected or missing:
        field_name = sorted(unexpected or missing)[0]
        raise _bad(ErrorReason.INVALID_COLUMN, field_name)
    return payload


def _require_text(fields: dict, name: str) -> str:
    value = fields[name]
    if not isinstance(value, str) or not value.strip():
        raise _bad(ErrorReason.INVALID_COLUMN, name)
    return value


def _bad(reason: ErrorReason, field_name: str | None = None) -> BadRequestError:
    return BadRequestError(reason, ErrorContext(field_name=field_name))
