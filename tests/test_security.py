from warm_admin.core.security import BCRYPT_ROUNDS, hash_password, verify_password


def test_hash_is_salted_bcrypt():
    first = hash_password("Admin@123456")
    second = hash_password("Admin@123456")
    assert first != second
    assert first.startswith("$2b$")
    assert f"${BCRYPT_ROUNDS:02d}$" in first
    assert "Admin@123456" not in first


def test_verify_password():
    hashed = hash_password("Admin@123456")
    assert verify_password("Admin@123456", hashed)
    assert not verify_password("wrong", hashed)


def test_verify_password_malformed_hash():
    assert verify_password("Admin@123456", "not-a-hash") is False


def test_password_limit_is_in_bytes():
    import pytest
    from warm_admin.core.exceptions import ValidationError

    assert verify_password("x" * 72, hash_password("x" * 72))
    with pytest.raises(ValidationError):
        hash_password("x" * 73)
    with pytest.raises(ValidationError):
        hash_password("é" * 37)
