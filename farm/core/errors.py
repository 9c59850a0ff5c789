"""Error Hierarchy — typed, categorized exceptions for all farm failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - AnimalNotFoundError is recovered locally (eviction no-op), never surfaced
    - InvariantViolationError signals a caller/internal bug, never a runtime condition
    - DatabaseError propagates unchanged; the core performs no retries or rollback

Design Decisions:
    - Single hierarchy with FarmError base: callers catch one type at the boundary
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from farm.core.domain_types import AnimalId, BarnId


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    color: str | None = None
    animal_id: AnimalId | None = None
    barn_id: BarnId | None = None
    debug_info: dict[str, Any] | None = None


class FarmError(Exception):
    """Base exception for all farm errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    @property
    def recoverable(self) -> bool:
        return self.severity in (ErrorSeverity.INFO, ErrorSeverity.WARNING)

    def to_dict(self) -> dict:
        """Flat, JSON-serializable view for structured logs."""
        return {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
            "context": {
                "color": self.context.color,
                "animal_id": self.context.animal_id,
                "barn_id": self.context.barn_id,
                "debug_info": self.context.debug_info,
            },
        }


# ─── Domain Errors ──────────────────────────────────────────────

class AnimalNotFoundError(FarmError):
    """Animal is not (or no longer) in the store."""
    def __init__(self, animal_id: AnimalId | None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.animal_id = animal_id
        super().__init__(
            f"Animal '{animal_id}' not found",
            "ANIMAL_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx,
        )


class AnimalAlreadyPlacedError(FarmError):
    """add_to_farm called with an animal the store already holds."""
    def __init__(self, animal_id: AnimalId, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.animal_id = animal_id
        super().__init__(
            f"Animal '{animal_id}' is already on the farm",
            "ANIMAL_ALREADY_PLACED", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx,
        )


class InvariantViolationError(FarmError):
    """A balancing precondition was broken; indicates a bug, not a runtime condition."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVARIANT_VIOLATION", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context,
        )


# ─── Infrastructure Errors ──────────────────────────────────────

class DatabaseError(FarmError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context,
        )
        self.operation = operation
