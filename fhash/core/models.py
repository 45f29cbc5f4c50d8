from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List

from fhash.core.errors import ManifestFormatError


class EntryKind(Enum):
    FILE = "F"
    DIRECTORY = "D"
    SUMMARY = "#"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> "EntryKind":
        try:
            return cls(code)
        except ValueError:
            raise ManifestFormatError(f"unknown entry kind: {code!r}") from None


@dataclass
class Entry:
    """
    One file or directory in a hashed tree.

    Only `digest` and `size` ever feed a parent digest. `name` is display
    data for the manifest; renaming a path never changes any digest.

    A SUMMARY entry is a DIRECTORY entry reported as the final result of
    a run; the two are otherwise identical.
    """
    kind: EntryKind
    digest: bytes
    size: int
    name: str = ""

    # Sorted ascending by hex digest for containers, empty for files
    children: List["Entry"] = field(default_factory=list)

    @property
    def hex_digest(self) -> str:
        return self.digest.hex()

    @property
    def is_container(self) -> bool:
        return self.kind in (EntryKind.DIRECTORY, EntryKind.SUMMARY)

    def as_summary(self) -> "Entry":
        self.kind = EntryKind.SUMMARY
        return self


# ============================================================
# Canonical ordering
# ============================================================

def sort_key(entry: Entry) -> str:
    return entry.hex_digest


def sort_entries(entries: Iterable[Entry]) -> List[Entry]:
    """
    Order entries ascending by lowercase hex digest.

    Both directory digests and manifests use this order, so it must not
    depend on names or on the order the filesystem listed them in.
    """
    return sorted(entries, key=sort_key)
