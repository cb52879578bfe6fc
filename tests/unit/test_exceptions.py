"""Unit tests for domain exceptions."""

import pytest

from actionscope.domain.exceptions import (
    ActionScopeError,
    InvalidStatusTransition,
    NotFound,
    PermissionDenied,
    ValidationError,
)


def test_permission_denied_inherits_actionscope_error() -> None:
    """PermissionDenied is a subclass of ActionScopeError."""
    assert issubclass(PermissionDenied, ActionScopeError)


def test_invalid_status_transition_is_validation_error() -> None:
    """InvalidStatusTransition can be handled as a ValidationError."""
    assert issubclass(InvalidStatusTransition, ValidationError)
    assert issubclass(ValidationError, ActionScopeError)


def test_not_found_message() -> None:
    """NotFound carries the resource and identifier."""
    err = NotFound("Action", "a1")
    assert str(err) == "Action a1 not found"
    assert err.resource == "Action"
    assert str(NotFound("Action")) == "Action not found"


def test_invalid_status_transition_message() -> None:
    err = InvalidStatusTransition("planned", "validated")
    assert (err.current, err.target) == ("planned", "validated")
    with pytest.raises(ActionScopeError, match="planned -> validated"):
        raise err
