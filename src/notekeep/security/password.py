"""Password hashing and policy utilities."""

import re
from typing import List

from passlib.context import CryptContext

from ..config import get_settings

# Characters that satisfy the "special character" rule of the password policy
SPECIAL_CHARACTERS = "!@#$%^&*()_+-=`~,.[]{}"
MIN_PASSWORD_LENGTH = 8

_UPPERCASE_RE = re.compile(r"[A-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SPECIAL_RE = re.compile(f"[{re.escape(SPECIAL_CHARACTERS)}]")

# Password hashing context
# Use bcrypt_sha256 to avoid bcrypt's 72-byte truncation issue on long passwords
# This pre-hashes with SHA-256 before applying bcrypt.
pwd_context = CryptContext(
    schemes=["bcrypt_sha256"],
    deprecated="auto",
    bcrypt_sha256__rounds=get_settings().password_hash_rounds,
)


def hash_password(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def password_policy_violations(password: str) -> List[str]:
    """Return the policy rules a password breaks (empty when it is acceptable)."""
    violations = []
    if len(password) < MIN_PASSWORD_LENGTH:
        violations.append(f"at least {MIN_PASSWORD_LENGTH} characters")
    if not _UPPERCASE_RE.search(password):
        violations.append("one upper case letter")
    if not _DIGIT_RE.search(password):
        violations.append("one number")
    if not _SPECIAL_RE.search(password):
        violations.append(f"one special character ({SPECIAL_CHARACTERS})")
    return violations
