"""Pricing collaborator."""

from listing_engine.services.pricing.total_cost import PricingFn, calculate_total_cost

__all__ = ["PricingFn", "calculate_total_cost"]
