from __future__ import annotations

from app.core.security import hash_password, verify_password


def test_hash_and_verify_password():
    hashed = hash_password("correct horse", iterations=1000)
    assert hashed.startswith("pbkdf2_sha256$1000$")
    assert verify_password("correct horse", hashed)
    assert not verify_password("wrong horse", hashed)


def test_same_password_gets_distinct_salts():
    assert hash_password("secret-pass", iterations=1000) != hash_password("secret-pass", iterations=1000)


def test_verify_rejects_garbage_hash():
    assert not verify_password("secret-pass", "not-a-hash")
    assert not verify_password("secret-pass", "md5$1$salt$digest")
