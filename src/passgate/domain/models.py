"""Records read from storage by the authentication core."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class User:
    """A registered user.

    ``password_hash`` is opaque; it is only ever checked through the
    password hashing service, never compared directly.
    """

    id: int
    email: str
    password_hash: bytes = field(repr=False)


@dataclass(frozen=True)
class App:
    """An application (tenant) that requests tokens for its users.

    Applications are provisioned out-of-band; ``secret`` signs every token
    issued for this application.
    """

    id: int
    name: str
    secret: str = field(repr=False)
