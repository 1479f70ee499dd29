"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - CustomerId wraps the integer primary key — never use bare int in domain logic
    - Field limits live here so schemas, validator and ORM agree

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CustomerId = NewType("CustomerId", int)


# ─── Field Limits ────────────────────────────────────────────────

NAME_MAX_LENGTH = 100
POSTCODE_MAX_LENGTH = 10
ADDRESS_LINE_MAX_LENGTH = 255


# ─── Enums ───────────────────────────────────────────────────────

class MediaType(str, Enum):
    """Representations a single customer can be rendered as."""
    JSON = "application/json"
    XML = "application/xml"
