"""Errors raised by entity registries."""


class UnknownEntityError(LookupError):
    """Raised when a registry is asked for a key it never issued.

    This is a programming error in the caller: keys are minted only by the
    registry, so a miss means a document referenced a key from another
    registry, or invented one. Registries never substitute a default.
    """

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Unknown entity key: {key!r}")
