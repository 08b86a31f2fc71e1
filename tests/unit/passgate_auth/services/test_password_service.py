"""Unit tests for PasswordHashingService."""

import pytest

from passgate_auth.services import PasswordHashingService


class TestPasswordHashingService:
    """Tests for password hashing and verification."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = PasswordHashingService(rounds=4)  # Low rounds for fast tests

    def test_hash_returns_bcrypt_format(self):
        """Test that hash returns a self-describing bcrypt hash."""
        hashed = self.service.hash("secure_password123")

        assert isinstance(hashed, bytes)
        assert hashed.startswith(b"$2")
        # cost factor is embedded
        assert hashed.split(b"$")[2] == b"04"
        assert len(hashed) == 60

    def test_verify_correct_password(self):
        password = "my_secret_password"
        hashed = self.service.hash(password)

        assert self.service.verify(password, hashed) is True

    def test_verify_incorrect_password(self):
        """Test that a mismatch is a plain False, not an exception."""
        hashed = self.service.hash("my_secret_password")

        assert self.service.verify("wrong_password", hashed) is False

    def test_verify_invalid_hash_returns_false(self):
        """Test that verify returns False for invalid hash format."""
        assert self.service.verify("password", b"not_a_valid_hash") is False
        assert self.service.verify("password", b"") is False

    def test_hash_produces_different_hashes(self):
        """Test that hashing same password twice produces different hashes."""
        password = "same_password"
        hash1 = self.service.hash(password)
        hash2 = self.service.hash(password)

        # Due to random salt, hashes should differ
        assert hash1 != hash2
        # But both should verify
        assert self.service.verify(password, hash1)
        assert self.service.verify(password, hash2)

    def test_unicode_password(self):
        password = "pässwörd-密码"
        hashed = self.service.hash(password)

        assert self.service.verify(password, hashed)
        assert not self.service.verify("passwort", hashed)

    def test_verify_dummy_pays_the_configured_cost(self):
        """Test that the dummy check runs a real bcrypt verification."""
        self.service.verify_dummy("anything")

        dummy_hash = self.service._dummy_hash
        assert dummy_hash is not None
        assert b"$04$" in dummy_hash
        assert self.service.verify("anything", dummy_hash) is False

    def test_verify_dummy_reuses_its_hash(self):
        self.service.verify_dummy("anything")
        first = self.service._dummy_hash

        self.service.verify_dummy("anything else")

        assert self.service._dummy_hash is first


class TestRounds:
    """Tests for the work factor configuration."""

    def test_default_rounds(self):
        assert PasswordHashingService().rounds == PasswordHashingService.DEFAULT_ROUNDS

    @pytest.mark.parametrize("rounds", [3, 32])
    def test_out_of_range_rounds_raise(self, rounds):
        with pytest.raises(ValueError, match="between"):
            PasswordHashingService(rounds=rounds)
