# storage/listing.py
"""Key listing result."""

from dataclasses import dataclass, field

from storage.base import Key


@dataclass(frozen=True)
class KeyListing:
    """Keys matching a prefix, split into files and directories."""

    keys: list[Key] = field(default_factory=list)
    dirs: list[Key] = field(default_factory=list)

    def as_dict(self) -> dict[str, list[Key]]:
        return {"keys": list(self.keys), "dirs": list(self.dirs)}
