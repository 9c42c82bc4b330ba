# ==============================================================================
# SECURITY UNIT TESTS
# ==============================================================================

from datetime import timedelta

import pytest

from artverse.core.exceptions import InvalidTokenError, TokenExpiredError
from artverse.core.security import (
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)
from artverse.core.settings import Settings


class TestPasswords:

    def test_hash_and_verify(self):
        hashed = hash_password("s3cret")
        assert hashed != "s3cret"
        assert verify_password("s3cret", hashed)
        assert not verify_password("wrong", hashed)


class TestTokens:

    def test_round_trip_claims(self, test_settings: Settings):
        token = create_access_token(
            "65f0c0ffee0000000000beef",
            test_settings,
            additional_claims={"role": "artist", "email": "a@x.com"},
        )
        payload = decode_token(token, test_settings)
        assert payload["sub"] == "65f0c0ffee0000000000beef"
        assert payload["role"] == "artist"
        assert payload["type"] == "access"

    def test_expired_token(self, test_settings: Settings):
        token = create_access_token(
            "65f0c0ffee0000000000beef",
            test_settings,
            expires_delta=timedelta(seconds=-10),
        )
        with pytest.raises(TokenExpiredError):
            decode_token(token, test_settings)

    def test_foreign_signature(self, test_settings: Settings):
        other = test_settings.model_copy(
            update={"SECRET_KEY": "another-secret-key-that-is-32-chars-long"}
        )
        token = create_access_token("65f0c0ffee0000000000beef", other)
        with pytest.raises(InvalidTokenError):
            decode_token(token, test_settings)
