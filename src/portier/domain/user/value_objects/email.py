"""Email address value object.

Addresses are compared and stored lower-cased, which is what makes the
unique email rule case-insensitive. Syntax checking is delegated to
``email_validator``, the same checker behind pydantic's ``EmailStr``, so
anything the API schemas accept is accepted here too.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email

from portier.domain.user.exceptions import InvalidEmailError


@dataclass(frozen=True)
class Email:
    """A syntactically valid, normalized email address."""

    value: str

    def __post_init__(self) -> None:
        candidate = (self.value or "").strip()
        if not candidate:
            msg = "Email cannot be empty"
            raise InvalidEmailError(msg)
        try:
            checked = validate_email(candidate, check_deliverability=False)
        except EmailNotValidError as e:
            msg = f"Invalid email format: {self.value}"
            raise InvalidEmailError(msg) from e
        object.__setattr__(self, "value", checked.normalized.lower())

    def __str__(self) -> str:
        return self.value
