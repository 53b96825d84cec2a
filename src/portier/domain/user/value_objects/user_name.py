"""Display name value object."""

from dataclasses import dataclass

from portier.domain.user.exceptions import InvalidNameError

MAX_NAME_LENGTH = 100


@dataclass(frozen=True)
class UserName:
    """A user's display name, stripped of surrounding whitespace."""

    value: str

    def __post_init__(self) -> None:
        normalized = (self.value or "").strip()
        if not normalized:
            msg = "Name cannot be empty"
            raise InvalidNameError(msg)
        if len(normalized) > MAX_NAME_LENGTH:
            msg = f"Name cannot exceed {MAX_NAME_LENGTH} characters"
            raise InvalidNameError(msg)
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
