"""Value objects for the user domain."""

from portier.domain.user.value_objects.email import Email
from portier.domain.user.value_objects.user_name import UserName

__all__ = [
    "Email",
    "UserName",
]
