"""Listing renewal."""

from listing_engine.services.renewal.renewal_service import (
    ListingRenewalService,
    RenewalResult,
    build_renewed_tags,
)
from listing_engine.services.renewal.signer import IListingSigner

__all__ = ["IListingSigner", "ListingRenewalService", "RenewalResult", "build_renewed_tags"]
