"""
Tests for bcrypt password hashing.
"""

from auth.password import BCRYPT_ROUNDS, hash_password, verify_password


class TestHashPassword:
    def test_default_cost_is_ten_rounds(self):
        assert BCRYPT_ROUNDS == 10
        hashed = hash_password("secret123")
        assert hashed.startswith("$2b$10$")

    def test_hash_is_not_the_plaintext(self):
        hashed = hash_password("secret123", rounds=4)
        assert "secret123" not in hashed
        assert len(hashed) <= 255

    def test_same_password_gets_different_salts(self):
        first = hash_password("secret123", rounds=4)
        second = hash_password("secret123", rounds=4)
        assert first != second
        assert verify_password("secret123", first)
        assert verify_password("secret123", second)


class TestVerifyPassword:
    def test_wrong_password(self):
        hashed = hash_password("secret123", rounds=4)
        assert verify_password("wrong", hashed) is False

    def test_malformed_hash_returns_false(self):
        assert verify_password("secret123", "not-a-bcrypt-hash") is False
        assert verify_password("secret123", "") is False

    def test_none_hash_returns_false(self):
        assert verify_password("secret123", None) is False
