"""Unit tests for PasswordHashingService."""

from passgate_auth.services import PasswordHashingService


class TestPasswordHashingService:
    """Tests for password hashing and verification."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = PasswordHashingService(rounds=4)  # Low rounds for fast tests

    def test_hash_returns_bcrypt_format(self):
        """Test that hash returns a valid bcrypt hash."""
        hashed = self.service.hash("secure_password123")

        # bcrypt hashes start with $2b$ or $2a$
        assert hashed.startswith("$2")
        assert len(hashed) == 60

    def test_hash_never_contains_plaintext(self):
        password = "plaintext-password"
        assert password not in self.service.hash(password)

    def test_verify_correct_password(self):
        """Test that verify returns True for correct password."""
        hashed = self.service.hash("my_secret_password")

        assert self.service.verify("my_secret_password", hashed) is True

    def test_verify_incorrect_password(self):
        """Test that verify returns False for incorrect password."""
        hashed = self.service.hash("my_secret_password")

        assert self.service.verify("wrong_password", hashed) is False

    def test_verify_invalid_hash_returns_false(self):
        """Test that verify returns False for invalid hash format."""
        assert self.service.verify("password", "not_a_valid_hash") is False
        assert self.service.verify("password", "") is False

    def test_hash_produces_different_hashes(self):
        """Test that hashing same password twice produces different hashes."""
        password = "same_password"
        hash1 = self.service.hash(password)
        hash2 = self.service.hash(password)

        # Due to random salt, hashes should differ
        assert hash1 != hash2
        assert self.service.verify(password, hash1)
        assert self.service.verify(password, hash2)

    def test_unicode_password_roundtrip(self):
        password = "pässwörd-密码-🔑"
        hashed = self.service.hash(password)

        assert self.service.verify(password, hashed)
        assert not self.service.verify("passwort-密码-🔑", hashed)

    def test_only_first_72_bytes_are_significant(self):
        """bcrypt ignores input beyond 72 bytes."""
        base = "a" * 72
        hashed = self.service.hash(base + "tail-one")

        assert self.service.verify(base + "tail-two", hashed)


class TestNeedsRehash:
    """Tests for work factor upgrade detection."""

    def test_same_rounds_does_not_need_rehash(self):
        service = PasswordHashingService(rounds=4)
        assert service.needs_rehash(service.hash("password123")) is False

    def test_different_rounds_needs_rehash(self):
        old = PasswordHashingService(rounds=4)
        new = PasswordHashingService(rounds=5)

        assert new.needs_rehash(old.hash("password123")) is True

    def test_garbage_hash_needs_rehash(self):
        service = PasswordHashingService(rounds=4)
        assert service.needs_rehash("garbage") is True

    def test_default_rounds(self):
        assert PasswordHashingService().rounds == 12


class TestDummyHash:
    """Tests for the hash used when no user matches a login."""

    def test_dummy_hash_uses_configured_rounds(self):
        service = PasswordHashingService(rounds=5)

        assert service.dummy_hash.startswith("$2b$05$")
        assert service.needs_rehash(service.dummy_hash) is False

    def test_dummy_hash_rejects_ordinary_passwords(self):
        service = PasswordHashingService(rounds=4)

        assert service.verify("password123", service.dummy_hash) is False
        assert service.verify("", service.dummy_hash) is False

    def test_dummy_hash_is_stable_per_instance(self):
        service = PasswordHashingService(rounds=4)
        assert service.dummy_hash == service.dummy_hash
