# -*- coding: utf-8 -*-
"""ListingFormInput: seller input for publishing a new or edited listing."""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from listing_engine.models.duration_policy import CUSTOM_TOKEN, DurationPolicy, NamedPolicy
from listing_engine.services.listing_duration.catalog import (
    DEFAULT_LISTING_DURATION,
    lookup_definition,
    validate_custom_duration,
)


class ListingFormInput(BaseModel):
    """Validated form values. Strings are kept as typed so tags carry them verbatim."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str
    description: str = ""
    price: str
    currency: str
    location: str = ""
    shipping_option: str = "N/A"
    shipping_cost: Optional[str] = None
    images: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    """Accepts a list or a comma-separated string."""
    quantity: Optional[int] = None
    sizes: list[str] = Field(default_factory=list)
    size_quantities: dict[str, int] = Field(default_factory=dict)
    volumes: list[str] = Field(default_factory=list)
    volume_prices: dict[str, float] = Field(default_factory=dict)
    condition: Optional[str] = None
    status: Optional[str] = None
    required: Optional[str] = None
    restrictions: Optional[str] = None
    pickup_locations: list[str] = Field(default_factory=list)

    listing_duration: str = DEFAULT_LISTING_DURATION.token
    """Named cadence token or 'custom'. Unknown tokens fall back to the default cadence."""
    custom_duration_days: float = 0
    custom_duration_hours: float = 0

    d: Optional[str] = None
    """Existing slug when editing; a new one is derived from the title otherwise."""

    @field_validator("categories", "sizes", "volumes", mode="before")
    @classmethod
    def _split_csv(cls, value: Union[str, list[str], None]) -> list[str]:
        if value is None:
            return []
        if isinstance(value, str):
            return [part for part in value.split(",") if part.strip()]
        return value

    def duration_policy(self) -> DurationPolicy:
        """Policy selected in the form.

        Raises:
            InvalidDurationPolicyError: if 'custom' is selected with less than one hour.
        """
        if self.listing_duration == CUSTOM_TOKEN:
            return validate_custom_duration(self.custom_duration_days, self.custom_duration_hours)
        definition = lookup_definition(self.listing_duration)
        if definition is None:
            return DEFAULT_LISTING_DURATION
        return NamedPolicy(definition.value)
