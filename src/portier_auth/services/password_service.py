"""bcrypt-backed password hasher.

Plaintext passwords enter here and leave as salted one-way hashes. Nothing
else in Portier touches bcrypt directly.
"""

import bcrypt

from portier_auth.exceptions import WeakPasswordError

_ENCODING = "utf-8"


class PasswordHashingService:
    """Hash, check and grade passwords.

    Examples
    --------
    >>> hasher = PasswordHashingService(rounds=4)
    >>> stored = hasher.hash("hunter22")
    >>> hasher.verify("hunter22", stored), hasher.verify("hunter23", stored)
    (True, False)
    """

    MIN_LENGTH = 6
    # bcrypt silently truncates anything longer
    MAX_BYTES = 72

    def __init__(self, rounds: int = 12):
        """
        Parameters
        ----------
        rounds
            bcrypt cost factor (log2 of the key expansion iterations).
            Tests use 4; production should stay at 12 or above.
        """
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """Return a fresh salted hash for ``password``.

        Raises
        ------
        WeakPasswordError
            When the password fails :meth:`validate_strength`
        """
        self.validate_strength(password)
        digest = bcrypt.hashpw(
            password.encode(_ENCODING),
            bcrypt.gensalt(rounds=self._rounds),
        )
        return digest.decode(_ENCODING)

    def verify(self, password: str, password_hash: str) -> bool:
        """Check ``password`` against a stored hash.

        Malformed hashes and over-long inputs simply do not match.
        """
        candidate = password.encode(_ENCODING)
        if len(candidate) > self.MAX_BYTES:
            return False
        try:
            return bcrypt.checkpw(candidate, password_hash.encode(_ENCODING))
        except (TypeError, ValueError):
            return False

    def validate_strength(self, password: str) -> None:
        """Enforce the password policy.

        A password needs at least ``MIN_LENGTH`` characters and must fit in
        ``MAX_BYTES`` once encoded. Blank passwords are refused outright.
        """
        if not password or password.isspace():
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters"
            raise WeakPasswordError(msg)

        if len(password.encode(_ENCODING)) > self.MAX_BYTES:
            msg = f"Password cannot exceed {self.MAX_BYTES} bytes"
            raise WeakPasswordError(msg)

    def needs_rehash(self, password_hash: str) -> bool:
        """Tell whether a stored hash was made with another cost factor.

        Hashes look like ``$2b$<cost>$<salt+digest>``. Anything that does
        not parse is reported as needing a rehash.
        """
        segments = password_hash.split("$")
        if len(segments) < 4 or not segments[2].isdigit():
            return True
        return int(segments[2]) != self._rounds
