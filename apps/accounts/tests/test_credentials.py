"""Tests for scrypt password hashing."""

from apps.accounts.services import hash_password, verify_password


class TestPasswordHashing:

    def test_stored_format_is_digest_dot_salt(self):
        stored = hash_password('secret123')
        digest, salt = stored.split('.')

        assert len(digest) == 128  # 64 byte key, hex
        assert len(salt) == 32  # 16 byte salt, hex

    def test_same_password_gets_distinct_salts(self):
        first = hash_password('secret123')
        second = hash_password('secret123')

        assert first != second
        assert verify_password('secret123', first)
        assert verify_password('secret123', second)

    def test_wrong_password_never_verifies(self):
        stored = hash_password('secret123')

        assert not verify_password('secret124', stored)
        assert not verify_password('', stored)

    def test_malformed_stored_value_never_verifies(self):
        assert not verify_password('secret123', '')
        assert not verify_password('secret123', 'nodot')
        assert not verify_password('secret123', 'a.b.c')
        assert not verify_password('secret123', '.salt')
