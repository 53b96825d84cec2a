"""Unit tests for the bearer token check."""

from datetime import timedelta
from unittest.mock import Mock
from uuid import uuid4

import pytest

from portier.application.context import UserContext
from portier.application.services import authenticate_token
from portier_auth import InvalidTokenError, JWTService


class TestAuthenticateToken:
    """Tests for authenticate_token."""

    def setup_method(self):
        """Set up test fixtures."""
        self.jwt_service = JWTService(secret_key="guard-secret")
        self.user_id = uuid4()

    def test_valid_token_yields_user_context(self):
        token = self.jwt_service.create_access_token(self.user_id)

        context = authenticate_token(token, self.jwt_service)

        assert context == UserContext(user_id=self.user_id)

    @pytest.mark.parametrize("token", [None, "", "   "])
    def test_missing_token_rejected(self, token):
        with pytest.raises(InvalidTokenError):
            authenticate_token(token, self.jwt_service)

    def test_missing_token_never_reaches_verifier(self):
        jwt_service = Mock(spec=JWTService)

        with pytest.raises(InvalidTokenError):
            authenticate_token(None, jwt_service)

        jwt_service.verify_token.assert_not_called()

    def test_expired_token_rejected(self):
        token = self.jwt_service.create_access_token(
            self.user_id,
            expires_delta=timedelta(seconds=-1),
        )

        with pytest.raises(InvalidTokenError):
            authenticate_token(token, self.jwt_service)

    def test_token_from_other_secret_rejected(self):
        token = JWTService(secret_key="other").create_access_token(self.user_id)

        with pytest.raises(InvalidTokenError):
            authenticate_token(token, self.jwt_service)
