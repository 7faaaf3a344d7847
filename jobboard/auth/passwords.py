"""Password hashing and strength rules."""

import re
from enum import Enum

from passlib.context import CryptContext
from passlib.exc import UnknownHashError

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


class PasswordStrength(str, Enum):
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str | None) -> bool:
    try:
        return pwd_context.verify(plain, hashed)
    except (UnknownHashError, ValueError, TypeError):
        # Stored value is empty or not a recognised hash
        return False


def evaluate_password_strength(password: str) -> PasswordStrength:
    """
    Score a password: one point each for length >= 6, an uppercase letter,
    a digit and a symbol. Three or more points is strong, two is medium.
    """
    score = 0
    if len(password) >= 6:
        score += 1
    if re.search(r"[A-Z]", password):
        score += 1
    if re.search(r"[0-9]", password):
        score += 1
    if re.search(r"[^A-Za-z0-9]", password):
        score += 1

    if score >= 3:
        return PasswordStrength.STRONG
    if score == 2:
        return PasswordStrength.MEDIUM
    return PasswordStrength.WEAK
