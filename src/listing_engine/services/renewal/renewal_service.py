# -*- coding: utf-8 -*-
"""ListingRenewalService: republishes a listing with a fresh expiration.

The renewed event is the prior tag list with `expiration` set to
reference_time + resolve_seconds(policy) and `expiration_policy` set to the
encoded policy. Renewal is the only way an Expired listing becomes Live again.
"""

from __future__ import annotations

import structlog
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from listing_engine.codec.tag_parser import parse_listing_event
from listing_engine.events.listings import ListingRenewedEvent
from listing_engine.exceptions import RenewalError
from listing_engine.models.duration_policy import DurationPolicy, NamedPolicy
from listing_engine.models.event import ProtocolEvent
from listing_engine.models.listing import ListingRecord
from listing_engine.services.expiration.snapshot import EXPIRATION_TAG, current_unix_time
from listing_engine.services.listing_duration.catalog import (
    DEFAULT_LISTING_DURATION,
    EXPIRATION_POLICY_TAG,
    encode_policy_tag,
    ensure_listing_duration_policy,
    resolve_seconds,
)

if TYPE_CHECKING:
    from bubus import EventBus  # type: ignore[import-untyped]

    from listing_engine.persistence.repositories.interfaces.listing_cache import IListingCache
    from listing_engine.services.renewal.signer import IListingSigner

DEFAULT_LISTING_KIND = 30402


@dataclass(frozen=True)
class RenewalResult:
    """Renewed event, its decoded record and the policy that was applied."""

    event: ProtocolEvent
    listing: Optional[ListingRecord]
    policy: DurationPolicy
    expiration: int


def build_renewed_tags(
    tags: Sequence[Sequence[str]],
    policy: DurationPolicy,
    reference_time: int,
    *,
    default: NamedPolicy = DEFAULT_LISTING_DURATION,
) -> list[list[str]]:
    """Prior tags with expiration and expiration_policy replaced.

    Each replaced tag keeps the position of its first occurrence; later duplicates
    are dropped; a missing tag is appended.
    """
    expiration = reference_time + resolve_seconds(policy, default=default)
    replacements: dict[str, list[str]] = {
        EXPIRATION_TAG: [EXPIRATION_TAG, str(expiration)],
        EXPIRATION_POLICY_TAG: encode_policy_tag(policy, default=default),
    }
    placed: set[str] = set()
    renewed: list[list[str]] = []
    for tag in tags:
        key = tag[0] if tag else None
        if key in replacements:
            if key not in placed:
                renewed.append(replacements[key])
                placed.add(key)
            continue
        renewed.append(list(tag))
    for key, tag in replacements.items():
        if key not in placed:
            renewed.append(tag)
    return renewed


def _policy_values(tags: Optional[Sequence[Sequence[str]]]) -> Optional[list[str]]:
    for tag in tags or ():
        if tag and tag[0] == EXPIRATION_POLICY_TAG:
            return list(tag[1:])
    return None


class ListingRenewalService:
    """Builds, signs, publishes and caches renewed listing events."""

    _event_bus: Optional["EventBus"] = None

    def __init__(
        self,
        cache: "IListingCache",
        signer: Optional["IListingSigner"] = None,
        event_bus: Optional[Any] = None,
        *,
        default_policy: NamedPolicy = DEFAULT_LISTING_DURATION,
        listing_kind: int = DEFAULT_LISTING_KIND,
        clock: Callable[[], int] = current_unix_time,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the renewal service.

        Args:
            cache: Listing cache; the renewed listing is added to it.
            signer: Signing collaborator; None means the seller is not signed in.
            event_bus: Optional; if set, emits ListingRenewedEvent.
            default_policy: Fallback when neither caller nor listing provide a valid policy.
            listing_kind: Event kind used when the prior event has none.
            clock: Returns the reference unix second when none is given.
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._cache = cache
        self._signer = signer
        self._event_bus = event_bus
        self._default_policy = default_policy
        self._listing_kind = listing_kind
        self._clock = clock
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def policy_for(self, record: ListingRecord) -> DurationPolicy:
        """Policy a listing renews with when the seller picks none: its own tag, else the default."""
        tags = record.raw_event.tags if record.raw_event is not None else None
        return ensure_listing_duration_policy(_policy_values(tags), default=self._default_policy)

    async def renew(
        self,
        record: ListingRecord,
        policy: Optional[DurationPolicy] = None,
        *,
        reference_time: Optional[int] = None,
    ) -> RenewalResult:
        """Republish record with a new expiration.

        Raises:
            RenewalError: if the raw event is unavailable, no signer is configured,
                or signing/publishing failed.
        """
        raw = record.raw_event
        if raw is None or raw.tags is None:
            raise RenewalError(
                "Unable to renew because the original listing event is unavailable.",
                listing_id=record.id,
            )
        if self._signer is None:
            raise RenewalError("You must be signed in to renew this listing.", listing_id=record.id)

        now = reference_time if reference_time is not None else self._clock()
        applied = policy if policy is not None else self.policy_for(record)
        tags = build_renewed_tags(raw.tags, applied, now, default=self._default_policy)
        expiration = now + resolve_seconds(applied, default=self._default_policy)

        try:
            event = await self._signer.sign_and_publish(
                kind=raw.kind or self._listing_kind,
                content=raw.content,
                tags=tags,
            )
        except Exception as exc:
            self._logger.error(
                "listing_renewal_failed",
                listing_id=record.id,
                error=str(exc),
                exc_info=True,
            )
            raise RenewalError(
                "Something went wrong while renewing. Please try again.",
                listing_id=record.id,
                cause=exc,
            ) from exc

        listing = parse_listing_event(event, reference_time=now)
        if listing is not None and not listing.is_expired:
            await self._cache.add(listing)

        self._logger.info(
            "listing_renewed",
            listing_id=event.id,
            listing_previous_id=record.id,
            listing_expiration=expiration,
            listing_policy=applied.token,
        )
        self._emit_renewed(event, record, expiration, applied)
        return RenewalResult(event=event, listing=listing, policy=applied, expiration=expiration)

    def _emit_renewed(
        self,
        event: ProtocolEvent,
        record: ListingRecord,
        expiration: int,
        policy: DurationPolicy,
    ) -> None:
        if self._event_bus is None:
            return
        self._event_bus.dispatch(
            ListingRenewedEvent(
                listing_id=event.id,
                previous_listing_id=record.id,
                author_key=event.author_key,
                expiration=expiration,
                policy_token=policy.token,
            )
        )
