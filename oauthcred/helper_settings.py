"""Settings that drive one run of the credential helper."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class CredentialOperation(enum.Enum):
    """The operation git asks the credential helper to perform."""

    UNKNOWN = "unknown"
    GET = "get"
    STORE = "store"
    ERASE = "erase"

    @classmethod
    def from_word(cls, word: str) -> "CredentialOperation":
        """Map an operation word from the command line.

        The match is case-sensitive. Any word other than ``get``, ``store``
        or ``erase`` gives ``UNKNOWN``.
        """
        if word == cls.UNKNOWN.value:
            return cls.UNKNOWN
        try:
            return cls(word)
        except ValueError:
            return cls.UNKNOWN


@dataclass
class HelperSettings:
    """Options and token state of the credential helper."""

    client_id: str | None = None
    client_secret: str | None = None
    access_token: str | None = None
    id_token: str | None = None
    service: str | None = None
    credential_operation: CredentialOperation = CredentialOperation.UNKNOWN
    verbose_level: int = 0
    generator_mode: bool = False
    run_gui_generator: bool = True
    run_limited_device: bool = True
    usage_requested: bool = False

    def update_tokens(
        self, access_token: str | None, id_token: str | None
    ) -> None:
        """Replace both tokens with the ones a token generator produced."""
        self.access_token = access_token
        self.id_token = id_token