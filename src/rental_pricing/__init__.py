"""
Rental Pricing Package

Quotes vehicle rentals from pickup/dropoff dates, driver age, license tenure
and vehicle category. Validates eligibility, then prices each rental day and
applies whole-rental adjustments.
"""

__version__ = "1.0.0"

from .engine import (
    PricingEngine,
    QuoteRequest,
    QuoteResult,
    CarType,
    QuoteError,
    price,
    is_weekend,
    is_high_season,
    days_between_inclusive,
    years_between,
    normalize_car_type,
    format_currency,
)

__all__ = [
    'PricingEngine', 'QuoteRequest', 'QuoteResult', 'CarType', 'QuoteError',
    'price', 'is_weekend', 'is_high_season', 'days_between_inclusive',
    'years_between', 'normalize_car_type', 'format_currency',
]
