"""
Проверка сложности пароля.

Правила проверяются по порядку: длина, заглавная буква, строчная буква,
цифра. Возвращается первое нарушенное правило.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

_UPPERCASE = re.compile(r"[A-Z]")
_LOWERCASE = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")


@dataclass(frozen=True)
class PasswordRules:
    """
    Args:
        min_length: Минимальная длина пароля
    """
    min_length: int = 8

    def __post_init__(self):
        """Валидация."""
        if self.min_length < 1:
            raise ValueError("min_length must be positive")


class PasswordValidationResult(str, Enum):
    """Результат проверки пароля."""
    VALID = "valid"
    TOO_SHORT = "tooShort"
    MISSING_UPPERCASE = "missingUppercase"
    MISSING_LOWERCASE = "missingLowercase"
    MISSING_NUMBER = "missingNumber"
    PASSWORDS_DO_NOT_MATCH = "passwordsDoNotMatch"

    @property
    def message(self) -> str:
        """Сообщение для пользователя (пустое для VALID)."""
        return _MESSAGES[self]

    @property
    def is_valid(self) -> bool:
        return self is PasswordValidationResult.VALID


_MESSAGES = {
    PasswordValidationResult.VALID: "",
    PasswordValidationResult.TOO_SHORT: "Password must be at least 8 characters",
    PasswordValidationResult.MISSING_UPPERCASE: "Password must contain at least one uppercase letter",
    PasswordValidationResult.MISSING_LOWERCASE: "Password must contain at least one lowercase letter",
    PasswordValidationResult.MISSING_NUMBER: "Password must contain at least one number",
    PasswordValidationResult.PASSWORDS_DO_NOT_MATCH: "Passwords do not match",
}


class PasswordValidator:
    """
    Валидатор пароля.

    Examples:
        >>> validator = PasswordValidator()
        >>> validator.validate("Abcdefg1")
        <PasswordValidationResult.VALID: 'valid'>
        >>> validator.validate("Abcdefg1", confirm_password="Abcdefg2")
        <PasswordValidationResult.PASSWORDS_DO_NOT_MATCH: 'passwordsDoNotMatch'>
    """

    def __init__(self, rules: Optional[PasswordRules] = None):
        self.rules = rules or PasswordRules()

    def validate(
        self,
        password: str,
        confirm_password: Optional[str] = None,
    ) -> PasswordValidationResult:
        """
        Проверить пароль и, если передано, его подтверждение.

        Несовпадение подтверждения проверяется только для пароля,
        прошедшего все правила.
        """
        # Длина в code points: "e\u0301" считается за два символа, а не за один
        if len(password) < self.rules.min_length:
            return PasswordValidationResult.TOO_SHORT
        if not _UPPERCASE.search(password):
            return PasswordValidationResult.MISSING_UPPERCASE
        if not _LOWERCASE.search(password):
            return PasswordValidationResult.MISSING_LOWERCASE
        if not _DIGIT.search(password):
            return PasswordValidationResult.MISSING_NUMBER

        if confirm_password is not None and password != confirm_password:
            return PasswordValidationResult.PASSWORDS_DO_NOT_MATCH

        return PasswordValidationResult.VALID
