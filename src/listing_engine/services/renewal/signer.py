# -*- coding: utf-8 -*-
"""Signing/publishing collaborator used by renewal (implemented outside the engine)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from listing_engine.models.event import ProtocolEvent


class IListingSigner(ABC):
    """Signs an unsigned listing event with the seller's key and publishes it to relays."""

    @abstractmethod
    async def sign_and_publish(
        self,
        *,
        kind: int,
        content: str,
        tags: list[list[str]],
    ) -> ProtocolEvent:
        """Return the signed, published event."""
        ...
