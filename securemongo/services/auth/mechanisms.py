"""MongoDB authentication mechanism names and parsing."""

from enum import Enum


class AuthMechanism(str, Enum):
    """
    Authentication mechanism label passed through to the driver.
    NONE (empty label) disables authentication entirely.
    """

    SCRAM_SHA_1 = "SCRAM-SHA-1"
    MONGODB_CR = "MONGODB-CR"
    PLAIN = "PLAIN"
    MONGODB_X500 = "MONGODB-X500"
    GSSAPI = "GSSAPI"
    NONE = ""

    def __str__(self) -> str:
        return self.value


# Match order for parse_auth_mechanism; NONE stays last
AUTH_MECHANISMS: tuple[AuthMechanism, ...] = (
    AuthMechanism.SCRAM_SHA_1,
    AuthMechanism.MONGODB_CR,
    AuthMechanism.PLAIN,
    AuthMechanism.MONGODB_X500,
    AuthMechanism.GSSAPI,
    AuthMechanism.NONE,
)


class UnrecognizedMechanismError(ValueError):
    """Raised when a mechanism name matches none of AUTH_MECHANISMS."""

    def __init__(self, mechanism: str):
        super().__init__(f"{mechanism} did not match an existing MongoDB authentication mechanism")
        self.mechanism = mechanism


def normalize_mechanism_name(value: str) -> str:
    """
    Upper-case and drop every whitespace character (any Unicode space class).
    str.isspace also counts the U+001C..U+001F separators as whitespace.
    """
    return "".join(ch for ch in value.upper() if not ch.isspace())


def parse_auth_mechanism(value: str) -> AuthMechanism:
    """
    Return the AuthMechanism named by `value`, ignoring case and whitespace.
    An empty or all-whitespace string yields AuthMechanism.NONE.
    Raises UnrecognizedMechanismError carrying the normalized name otherwise.
    """
    name = normalize_mechanism_name(value)
    for mechanism in AUTH_MECHANISMS:
        if name == mechanism.value:
            return mechanism
    raise UnrecognizedMechanismError(name)
