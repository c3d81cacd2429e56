# -*- coding: utf-8 -*-
"""ProtocolEvent: a signed, immutable protocol event as received from (or sent to) relays.

The engine reads only id, author_key, created_at and tags; kind, content and
signature are carried through untouched.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional

Tag = tuple[str, ...]
TagList = tuple[Tag, ...]


def freeze_tags(tags: Optional[Iterable[Sequence[Any]]]) -> Optional[TagList]:
    """Copy a tag list into nested tuples of str. None stays None."""
    if tags is None:
        return None
    return tuple(tuple(str(value) for value in tag) for tag in tags)


@dataclass(frozen=True, slots=True)
class ProtocolEvent:
    """One protocol event. `tags` is None when the event carried no tag list."""

    id: str
    author_key: str
    created_at: int
    kind: int
    content: str
    tags: Optional[TagList]
    signature: str = ""

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> ProtocolEvent:
        """Build from the wire JSON shape (pubkey, created_at, sig)."""
        return cls(
            id=str(raw.get("id") or ""),
            author_key=str(raw.get("pubkey") or raw.get("author_key") or ""),
            created_at=int(raw.get("created_at") or 0),
            kind=int(raw.get("kind") or 0),
            content=str(raw.get("content") or ""),
            tags=freeze_tags(raw.get("tags")),
            signature=str(raw.get("sig") or raw.get("signature") or ""),
        )

    def to_dict(self) -> dict[str, Any]:
        """Wire JSON shape."""
        return {
            "id": self.id,
            "pubkey": self.author_key,
            "created_at": self.created_at,
            "kind": self.kind,
            "content": self.content,
            "tags": [list(tag) for tag in self.tags] if self.tags is not None else None,
            "sig": self.signature,
        }
