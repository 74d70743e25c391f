"""Pricing data layer for the EZ Estimator engine."""

from ezestimator.data.pricing import PricingRates, ServiceRate
from ezestimator.data.rates import DEFAULT_RATES

__all__ = [
    "DEFAULT_RATES",
    "PricingRates",
    "ServiceRate",
]
