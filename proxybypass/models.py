from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from . import matching

WILDCARD = "*"


class EntryKind(str, Enum):
    WILDCARD = "wildcard"
    HOST = "host"  # exact host, IP literal or domain suffix
    CIDR = "cidr"


class BypassEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str = Field(..., min_length=1, description="Trimmed, lower-cased entry")
    kind: EntryKind

    @classmethod
    def from_raw(cls, raw: str) -> Optional["BypassEntry"]:
        """Normalize one comma-separated piece; blank pieces give None."""
        value = raw.strip().lower()
        if not value:
            return None
        if value == WILDCARD:
            kind = EntryKind.WILDCARD
        elif "/" in value:
            kind = EntryKind.CIDR
        else:
            kind = EntryKind.HOST
        return cls(value=value, kind=kind)

    def matches(self, hostname: str) -> bool:
        if self.kind is EntryKind.WILDCARD:
            return True
        return matching.matches(hostname, self.value)


class BypassList(BaseModel):
    model_config = ConfigDict(frozen=True)

    entries: List[BypassEntry] = Field(default_factory=list)

    @classmethod
    def parse(cls, raw: Optional[str]) -> "BypassList":
        """Split a NO_PROXY string on commas, dropping empty pieces."""
        entries = []
        for piece in (raw or "").split(","):
            entry = BypassEntry.from_raw(piece)
            if entry is not None:
                entries.append(entry)
        return cls(entries=entries)

    @property
    def contains_wildcard(self) -> bool:
        return any(e.kind is EntryKind.WILDCARD for e in self.entries)

    def normalized(self) -> List[str]:
        return [e.value for e in self.entries]

    def first_match(self, hostname: str) -> Optional[BypassEntry]:
        for entry in self.entries:
            if entry.matches(hostname):
                return entry
        return None

    def __len__(self) -> int:
        return len(self.entries)
