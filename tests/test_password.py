"""
Password hashing tests (argon2id wrapper).
"""

import pytest

from onboarding.services.password import PasswordHasher


@pytest.mark.unit
class TestPasswordHasher:
    def test_hash_then_verify_same_password(self, hasher):
        encoded = hasher.hash("secret")
        assert hasher.verify("secret", encoded) is True

    def test_verify_rejects_other_password(self, hasher):
        encoded = hasher.hash("secret")
        assert hasher.verify("Secret", encoded) is False
        assert hasher.verify("secret ", encoded) is False

    def test_hash_is_salted_argon2id(self, hasher):
        first = hasher.hash("secret")
        second = hasher.hash("secret")

        assert first.startswith("$argon2id$")
        assert first != second
        assert "secret" not in first

    def test_malformed_hash_is_rejection_not_crash(self, hasher):
        assert hasher.verify("secret", "not-a-hash") is False
        assert hasher.verify("secret", "$argon2id$v=19$garbage") is False

    def test_empty_inputs_rejected(self, hasher):
        encoded = hasher.hash("secret")
        assert hasher.verify("", encoded) is False
        assert hasher.verify("secret", "") is False

    def test_needs_rehash_when_parameters_change(self, hasher):
        stronger = PasswordHasher(time_cost=2, memory_cost=16, parallelism=1)
        encoded = hasher.hash("secret")

        assert hasher.needs_rehash(encoded) is False
        assert stronger.needs_rehash(encoded) is True

    def test_needs_rehash_for_unparseable_hash(self, hasher):
        assert hasher.needs_rehash("plaintext") is True
