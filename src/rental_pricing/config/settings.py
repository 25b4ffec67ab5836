"""
Centralized pricing rates and eligibility thresholds for the rental tool.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PricingSettings:
    """Rates and thresholds used by validation and the pricing engine."""
    
    # Eligibility
    min_driver_age: int = 18
    compact_only_max_age: int = 21  # inclusive
    min_license_years: float = 1
    
    # Per-day multipliers
    weekend_multiplier: float = 1.05
    high_season_multiplier: float = 1.15
    racer_multiplier: float = 1.5
    racer_surcharge_max_age: int = 25  # inclusive, high season only
    
    # Novice license: flat daily add-on in high season, total multiplier
    novice_daily_max_years: float = 3  # exclusive
    novice_daily_surcharge: float = 15.0
    novice_total_max_years: float = 2  # exclusive
    novice_total_multiplier: float = 1.3
    
    # Long rental entirely in low season
    long_rental_min_days: int = 11
    long_rental_multiplier: float = 0.9


# Default settings instance
_settings: Optional[PricingSettings] = None


def get_settings() -> PricingSettings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = PricingSettings()
    return _settings
