"""Unit tests for HTTP error translation and bearer token parsing."""

from uuid import uuid4

import pytest
from fastapi import HTTPException

from discuss.config import AuthSettings
from discuss.domain.error import (
    AuthenticationError,
    ConflictError,
    ForbiddenError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from discuss.domain.model import User
from discuss.domain.service import JWTService
from discuss.domain.value import Email, UserId, Username
from discuss.interface.api.security import bearer_token, require_user_id
from discuss.interface.error import to_http_exception
from discuss.util.jwt import JWTError

SECRET = "test-secret-0123456789abcdef0123456789"

ALICE = User(
    id=UserId(uuid4()),
    email=Email("alice@example.com"),
    username=Username("alice"),
    password_hash="x",
)


@pytest.mark.parametrize(
    ("error", "status_code"),
    [
        (NotFoundError("Comment", "c1"), 404),
        (ForbiddenError("edit", "comment", "c1", "u1"), 403),
        (InvalidStateError("Edit window expired"), 409),
        (ConflictError("Email is already registered"), 409),
        (AuthenticationError("Invalid email or password"), 401),
        (JWTError("Token has expired"), 401),
        (ValidationError("Password too short"), 400),
        (ValueError("badly formed hexadecimal UUID string"), 400),
        (RuntimeError("boom"), 500),
    ],
)
def test_to_http_exception_status(error, status_code):
    assert to_http_exception(error, "do things").status_code == status_code


def test_domain_message_is_passed_through():
    error = to_http_exception(InvalidStateError("Restore window expired"), "restore")

    assert error.detail == "Restore window expired"


def test_unexpected_error_detail_hides_internals():
    error = to_http_exception(RuntimeError("password=hunter2"), "update comment")

    assert error.detail == "Failed to update comment"


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        (None, None),
        ("", None),
        ("Bearer abc.def", "abc.def"),
        ("bearer abc.def", "abc.def"),
        ("Basic dXNlcjpwYXNz", None),
        ("Bearer", None),
    ],
)
def test_bearer_token(header, expected):
    assert bearer_token(header) == expected


class TestRequireUserId:
    def test_valid_token(self):
        jwt_service = JWTService(AuthSettings(jwt_secret=SECRET))
        token = jwt_service.issue_for(ALICE)

        assert require_user_id(jwt_service, token, "comment") == ALICE.id

    @pytest.mark.parametrize("token", [None, "garbage"])
    def test_missing_or_invalid_token(self, token):
        jwt_service = JWTService(AuthSettings(jwt_secret=SECRET))

        with pytest.raises(HTTPException) as exc_info:
            require_user_id(jwt_service, token, "create comments")

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Authentication required to create comments"

    def test_token_signed_with_other_secret(self):
        issuer = JWTService(AuthSettings(jwt_secret=SECRET))
        verifier = JWTService(AuthSettings(jwt_secret=SECRET[::-1]))

        with pytest.raises(HTTPException):
            require_user_id(verifier, issuer.issue_for(ALICE), "x")
