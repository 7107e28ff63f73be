"""
Sign-up Form Validation Example.
"""

from api_manager import EmailValidator, PasswordValidator


def validate_signup(email: str, password: str, confirm: str) -> None:
    if not EmailValidator().is_valid(email):
        print(f"{email!r}: invalid email")
        return

    result = PasswordValidator().validate(password, confirm_password=confirm)
    if result.is_valid:
        print(f"{email!r}: OK")
    else:
        print(f"{email!r}: {result.message}")


if __name__ == "__main__":
    validate_signup("john@example.com", "Abcdefg1", "Abcdefg1")
    validate_signup("john@example", "Abcdefg1", "Abcdefg1")
    validate_signup("john@example.com", "abcdefg1", "abcdefg1")
    validate_signup("john@example.com", "Abcdefg1", "Abcdefg2")
