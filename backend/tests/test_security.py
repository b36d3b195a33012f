"""Tests for bearer token verification and role extraction."""

import pytest
from authlib.jose import jwt
from fastapi import HTTPException

from bookstore.config import settings
from bookstore.security import Principal, decode_token

from conftest import make_token


class TestDecodeToken:

    def test_valid_token(self):
        principal = decode_token(make_token(subject="ada@bookstore.test", roles=["Customer"]))

        assert principal == Principal(subject="ada@bookstore.test", roles=frozenset({"Customer"}))

    def test_roles_from_both_claims_are_merged(self):
        token = make_token(roles=["Customer"], extra_claims={"role": ["Editor", settings.admin_role]})

        principal = decode_token(token)

        assert principal.roles == {"Customer", "Editor", settings.admin_role}
        assert principal.has_role(settings.admin_role)

    def test_token_without_roles_has_none(self):
        assert decode_token(make_token()).roles == frozenset()

    def test_expiry_within_leeway_is_accepted(self):
        principal = decode_token(make_token(expires_in=-(settings.jwt_leeway // 2)))

        assert principal.subject

    @pytest.mark.parametrize(
        "token",
        [
            "not-a-jwt",
            make_token(expires_in=-3600),
            make_token(secret="a-completely-different-secret"),
        ],
    )
    def test_rejected_tokens_are_401(self, token):
        with pytest.raises(HTTPException) as exc_info:
            decode_token(token)

        assert exc_info.value.status_code == 401
        assert exc_info.value.headers == {"WWW-Authenticate": "Bearer"}

    def test_missing_expiry_is_rejected(self):
        token = jwt.encode({"alg": "HS256"}, {"sub": "someone"}, settings.jwt_secret)

        with pytest.raises(HTTPException) as exc_info:
            decode_token(token.decode("utf-8"))

        assert exc_info.value.status_code == 401

    def test_missing_subject_is_rejected(self):
        token = make_token(subject="")

        with pytest.raises(HTTPException) as exc_info:
            decode_token(token)

        assert exc_info.value.detail == "Token has no subject"

    def test_other_algorithm_is_rejected(self):
        token = jwt.encode(
            {"alg": "HS512"},
            {"sub": "someone", "exp": 4102444800},
            settings.jwt_secret,
        )

        with pytest.raises(HTTPException):
            decode_token(token.decode("utf-8"))
