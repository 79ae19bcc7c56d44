"""Unit tests for session token issuance and verification."""

import unittest
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from jose import jwt

from domain.model.claim import PrivateClaim
from domain.model.errors import UnauthorizedError
from services.token_service import (
    JWT_ALGORITHM,
    JWT_EXPIRATION_HOURS,
    create_jwt,
    decode_jwt,
    new_claim,
)


class TestCreateJwt(unittest.TestCase):
    """Test create_jwt() and decode_jwt()."""

    def test_decode_returns_subject_and_email(self):
        token = create_jwt(new_claim('user-123', 'a@example.com'))

        claim = decode_jwt(token)

        self.assertEqual(claim.user_id, 'user-123')
        self.assertEqual(claim.email, 'a@example.com')
        self.assertIsNotNone(claim.expires_at)

    def test_new_claim_expires_after_configured_hours(self):
        claim = new_claim('user-123', 'a@example.com')

        self.assertEqual(claim.expires_at - claim.issued_at, timedelta(hours=JWT_EXPIRATION_HOURS))

    def test_expired_token_is_unauthorized(self):
        past = datetime.now(timezone.utc) - timedelta(hours=2)
        claim = PrivateClaim(
            user_id='user-123',
            email='a@example.com',
            issued_at=past,
            expires_at=past + timedelta(hours=1),
        )
        token = create_jwt(claim)

        with self.assertRaises(UnauthorizedError):
            decode_jwt(token)

    def test_token_signed_with_other_secret_is_unauthorized(self):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {'sub': 'user-123', 'email': 'a@example.com', 'exp': int((now + timedelta(hours=1)).timestamp())},
            'some-other-secret',
            algorithm=JWT_ALGORITHM,
        )

        with self.assertRaises(UnauthorizedError):
            decode_jwt(token)

    def test_garbage_token_is_unauthorized(self):
        with self.assertRaises(UnauthorizedError):
            decode_jwt('not.a.token')


if __name__ == '__main__':
    unittest.main()
