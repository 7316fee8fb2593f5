"""Unit tests for bcrypt password helpers."""

from storefront.util.password import hash_password, is_password_hash, verify_password


class TestPasswordHashing:
    def test_hash_verifies_against_original_password(self):
        hashed = hash_password("secret1", rounds=4)

        assert hashed != "secret1"
        assert is_password_hash(hashed)
        assert verify_password("secret1", hashed)
        assert not verify_password("secret2", hashed)

    def test_hashes_are_salted(self):
        assert hash_password("secret1", rounds=4) != hash_password("secret1", rounds=4)

    def test_federated_sentinel_never_matches(self):
        """A provider id stored in place of a hash must never verify."""
        sentinel = "google:abc123"

        assert not is_password_hash(sentinel)
        assert not verify_password("google:abc123", sentinel)
        assert not verify_password("", sentinel)

    def test_malformed_bcrypt_looking_value_does_not_raise(self):
        assert not verify_password("secret1", "$2b$10$tooshort")

    def test_empty_hash_is_not_a_password_hash(self):
        assert not is_password_hash("")
        assert not is_password_hash(None)
