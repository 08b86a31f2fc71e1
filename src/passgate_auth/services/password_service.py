"""Password hashing service using bcrypt.

Provides one-way password hashing and constant-time verification with a
configurable work factor.
"""

import bcrypt


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses bcrypt with a work factor fixed at construction. Hashes are
    self-describing (``$2b$<cost>$<salt><digest>``) so no salt has to be
    stored separately.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> password_hash = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", password_hash)
    True
    >>> service.verify("wrong_password", password_hash)
    False
    """

    DEFAULT_ROUNDS = 10
    MIN_ROUNDS = 4
    MAX_ROUNDS = 31
    # bcrypt rejects (5.x) or truncates (4.x) anything longer
    MAX_PASSWORD_BYTES = 72

    _DUMMY_PASSWORD = b"passgate-timing-dummy"

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Higher values are
            more expensive to brute-force and slower to verify.
        """
        if not self.MIN_ROUNDS <= rounds <= self.MAX_ROUNDS:
            msg = f"bcrypt rounds must be between {self.MIN_ROUNDS} and {self.MAX_ROUNDS}"
            raise ValueError(msg)

        self._rounds = rounds
        self._dummy_hash: bytes | None = None

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> bytes:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The bcrypt hash as bytes
        """
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt)

    def verify(self, password: str, password_hash: bytes) -> bool:
        """Verify a password against a hash.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The bcrypt hash to verify against

        Returns
        -------
        True if password matches, False otherwise
        """
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash)
        except (ValueError, TypeError):
            # Invalid hash format
            return False

    def verify_dummy(self, password: str) -> None:
        """Run a verification that always fails, at the configured cost.

        Called when there is no stored hash to check against, so that an
        unknown account costs the same time as a wrong password.
        """
        if self._dummy_hash is None:
            self._dummy_hash = bcrypt.hashpw(
                self._DUMMY_PASSWORD,
                bcrypt.gensalt(rounds=self._rounds),
            )
        self.verify(password, self._dummy_hash)
