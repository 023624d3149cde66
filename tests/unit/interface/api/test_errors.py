"""Unit tests for the domain error to HTTP status mapping."""

import pytest

from hive.domain.error import (
    DomainError,
    DuplicateError,
    ForbiddenError,
    NotFoundError,
    QuotaExceededError,
    UnauthorizedError,
    UpstreamFailureError,
    ValidationError,
)
from hive.interface.api.errors import status_for


@pytest.mark.parametrize(
    "error,expected",
    [
        (UnauthorizedError(), 401),
        (ForbiddenError(), 403),
        (QuotaExceededError(), 403),
        (NotFoundError("Post", "123"), 404),
        (DuplicateError("Username already exists"), 409),
        (ValidationError("Email is required"), 400),
        (UpstreamFailureError("Payment processor error"), 500),
        (DomainError("anything else"), 400),
    ],
)
def test_status_for(error, expected):
    assert status_for(error) == expected


def test_not_found_message_names_resource():
    assert NotFoundError("Post", "123").message == "Post not found"
