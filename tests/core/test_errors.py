"""Error hierarchy — codes, categories, severities and structured dict view."""

from farm.core.errors import (
    AnimalAlreadyPlacedError, AnimalNotFoundError, DatabaseError,
    ErrorCategory, ErrorContext, ErrorSeverity, FarmError, InvariantViolationError,
)


def test_not_found_is_recoverable_info():
    err = AnimalNotFoundError(42)
    assert isinstance(err, FarmError)
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND
    assert err.severity == ErrorSeverity.INFO
    assert err.recoverable
    assert err.context.animal_id == 42


def test_invariant_violation_is_critical():
    err = InvariantViolationError("no barns")
    assert err.code == "INVARIANT_VIOLATION"
    assert not err.recoverable


def test_already_placed_is_conflict():
    err = AnimalAlreadyPlacedError(3)
    assert err.category == ErrorCategory.CONFLICT
    assert "3" in err.message


def test_database_error_records_operation():
    err = DatabaseError("boom", "commit")
    assert err.operation == "commit"
    assert err.message == "Database commit failed: boom"


def test_to_dict_carries_context():
    err = InvariantViolationError(
        "mixed colors", ErrorContext(color="RED", barn_id=9),
    )
    data = err.to_dict()
    assert data["code"] == "INVARIANT_VIOLATION"
    assert data["category"] == "internal"
    assert data["severity"] == "critical"
    assert data["context"]["color"] == "RED"
    assert data["context"]["barn_id"] == 9
