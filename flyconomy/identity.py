"""Identity of the player."""

from __future__ import annotations

from dataclasses import dataclass

IDENTITY_SIZE = 32


@dataclass
class Identity:
    """A 32-byte identifier together with a display alias."""

    id: bytes = bytes(IDENTITY_SIZE)
    alias: str = "Pilot"

    def __post_init__(self) -> None:
        self.id = bytes(self.id)
        if len(self.id) != IDENTITY_SIZE:
            raise ValueError(
                f"identity id must be {IDENTITY_SIZE} bytes, got {len(self.id)}"
            )