"""String validators for sign-up and login forms."""

from .email import EmailValidator
from .password import PasswordRules, PasswordValidationResult, PasswordValidator

__all__ = [
    "EmailValidator",
    "PasswordRules",
    "PasswordValidationResult",
    "PasswordValidator",
]
