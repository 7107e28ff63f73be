"""Email format validation."""

import re

# Practical subset of RFC 5322: local part, "@", domain, TLD of 2+ letters
EMAIL_PATTERN = re.compile(r"[A-Z0-9a-z._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")


class EmailValidator:
    """
    Example:
        >>> EmailValidator().is_valid("a@b.co")
        True
        >>> EmailValidator().is_valid("a@b")
        False
    """

    def is_valid(self, email: str) -> bool:
        return EMAIL_PATTERN.fullmatch(email) is not None
