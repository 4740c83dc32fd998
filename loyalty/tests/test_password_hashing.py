from __future__ import annotations

import pytest

from loyalty.application.services.password_hashing import (
    MAX_PASSWORD_BYTES,
    WerkzeugPasswordHasher,
)
from loyalty.domain.users.exceptions import (
    CredentialsCheckError,
    InvalidCredentialsError,
    PasswordHashingError,
)


@pytest.fixture()
def hasher() -> WerkzeugPasswordHasher:
    return WerkzeugPasswordHasher(method="pbkdf2:sha256:1000")


def test_hash_is_salted(hasher: WerkzeugPasswordHasher) -> None:
    first = hasher.hash("s3cret!")
    second = hasher.hash("s3cret!")

    assert first != second
    assert "s3cret!" not in first


def test_check_accepts_matching_password(hasher: WerkzeugPasswordHasher) -> None:
    digest = hasher.hash("s3cret!")

    hasher.check(digest, "s3cret!")


def test_check_rejects_wrong_password(hasher: WerkzeugPasswordHasher) -> None:
    digest = hasher.hash("s3cret!")

    with pytest.raises(InvalidCredentialsError):
        hasher.check(digest, "wrong")


@pytest.mark.parametrize("digest", ["", "plain-text", "a$b", "$$", "nosuchmethod$salt$hash"])
def test_check_reports_corrupt_digest_as_internal(
    hasher: WerkzeugPasswordHasher, digest: str
) -> None:
    with pytest.raises(CredentialsCheckError) as exc_info:
        hasher.check(digest, "s3cret!")

    assert exc_info.value.status == 500


def test_hash_rejects_password_over_limit(hasher: WerkzeugPasswordHasher) -> None:
    hasher.hash("p" * MAX_PASSWORD_BYTES)

    with pytest.raises(PasswordHashingError):
        hasher.hash("p" * (MAX_PASSWORD_BYTES + 1))


def test_limit_counts_bytes_not_characters(hasher: WerkzeugPasswordHasher) -> None:
    # two bytes per character in UTF-8
    with pytest.raises(PasswordHashingError):
        hasher.hash("ж" * (MAX_PASSWORD_BYTES // 2 + 1))


def test_default_scheme_is_scrypt() -> None:
    digest = WerkzeugPasswordHasher().hash("s3cret!")

    assert digest.startswith("scrypt:")
