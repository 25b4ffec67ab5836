"""
Rental Pricing Engine - validates a quote request and prices it day by day.

Every rental day starts at the driver's age and picks up weekend, season,
Racer and novice-license adjustments. Day prices are summed, then the
novice-license and long low-season rental adjustments apply to the total.
Each step is recorded in the result trace.
"""
import logging
from datetime import date
from typing import Any, Optional

from ..config.settings import get_settings, PricingSettings
from .calendar_utils import is_weekend, is_high_season
from .formatting import format_currency
from .models import CarType, DayCharge, QuoteRequest, QuoteResult, TraceStep
from .validation import QuoteValidationError, ValidatedQuote, validate_request

logger = logging.getLogger(__name__)


class PricingEngine:
    """
    Core engine that turns a QuoteRequest into a QuoteResult.

    Resolution order:
    1. Normalize the vehicle type and validate the request
    2. For each rental day: weekend, high season, Racer, novice license, floor
    3. Sum day prices into the subtotal
    4. Apply novice-license and long low-season rental adjustments
    5. Format the subtotal as currency
    """

    def __init__(self, settings: Optional[PricingSettings] = None):
        self.settings = settings or get_settings()

    def quote(
        self,
        pickup_location: str,
        dropoff_location: str,
        pickup_date: Any,
        dropoff_date: Any,
        vehicle_type: Optional[str],
        age: int,
        license_years: Any = None,
        license_issued: Any = None,
    ) -> dict:
        """
        Calculate a quote and return the caller-facing dict.

        Returns:
            {"success": True, "price": "$..."} or {"success": False, "error": "..."}
        """
        request = QuoteRequest(
            pickup_location=pickup_location,
            dropoff_location=dropoff_location,
            pickup_date=pickup_date,
            dropoff_date=dropoff_date,
            vehicle_type=vehicle_type,
            age=age,
            license_years=license_years,
            license_issued=license_issued,
        )
        return self.calculate(request).to_dict()

    def calculate(self, request: QuoteRequest) -> QuoteResult:
        """
        Calculate a quote with full traceability.

        Never raises for bad dates, categories or tenure; validation failures
        come back as a QuoteResult with success=False. Age must be a number
        and a non-numeric age raises TypeError.
        """
        try:
            quote = validate_request(request, self.settings)
        except QuoteValidationError as e:
            logger.debug("Quote rejected: %s", e.error.name)
            return QuoteResult.failed(e.error)

        trace: list[TraceStep] = [
            TraceStep("Request", f"{quote.car_type.value}, driver age {quote.age}, "
                      f"license {quote.license_years:g}y", f"{len(quote.days)} day(s)"),
        ]

        charges = [self._price_day(day, quote) for day in quote.days]
        subtotal = sum(charge.price for charge in charges)
        trace.append(TraceStep("Subtotal", f"Sum of {len(charges)} day price(s)", f"${subtotal:.2f}"))

        subtotal = self._apply_rental_adjustments(subtotal, quote, trace)

        price = format_currency(subtotal)
        logger.debug(
            "Quote priced: %s over %d day(s) = %s", quote.car_type.value, len(charges), price,
            extra={"quote": {"car_type": quote.car_type.value, "days": len(charges), "price": price}},
        )
        return QuoteResult.ok(price=price, subtotal=subtotal, days=charges, trace=trace)

    def _price_day(self, day: date, quote: ValidatedQuote) -> DayCharge:
        """Price a single rental day, starting from the driver's age."""
        s = self.settings
        base = float(quote.age)
        charge = DayCharge(
            day=day,
            base=base,
            price=base,
            weekend=is_weekend(day),
            high_season=is_high_season(day),
        )
        charge.add_trace("Base", "Driver age", f"${base:.2f}")

        daily = base
        if charge.weekend:
            daily *= s.weekend_multiplier
            charge.adjustments.append("weekend")
            charge.add_trace("Weekend", f"x{s.weekend_multiplier:g}", f"${daily:.2f}")

        if charge.high_season:
            daily *= s.high_season_multiplier
            charge.adjustments.append("high_season")
            charge.add_trace("High Season", f"x{s.high_season_multiplier:g}", f"${daily:.2f}")

        # Racer surcharge never applies on low-season days
        if (quote.car_type is CarType.RACER
                and quote.age <= s.racer_surcharge_max_age
                and charge.high_season):
            daily *= s.racer_multiplier
            charge.adjustments.append("racer")
            charge.add_trace("Racer", f"Driver {s.racer_surcharge_max_age} or under, x{s.racer_multiplier:g}", f"${daily:.2f}")

        if quote.license_years < s.novice_daily_max_years and charge.high_season:
            daily += s.novice_daily_surcharge
            charge.adjustments.append("novice_daily")
            charge.add_trace("Novice License", f"Under {s.novice_daily_max_years:g} years, +${s.novice_daily_surcharge:.2f}", f"${daily:.2f}")

        if daily < base:
            daily = base
            charge.add_trace("Floor", "Raised to driver age", f"${daily:.2f}")

        charge.price = daily
        return charge

    def _apply_rental_adjustments(self, subtotal: float, quote: ValidatedQuote, trace: list[TraceStep]) -> float:
        """Apply whole-rental multipliers to the summed day prices."""
        s = self.settings

        if quote.license_years < s.novice_total_max_years:
            subtotal *= s.novice_total_multiplier
            trace.append(TraceStep("Novice License", f"Under {s.novice_total_max_years:g} years, x{s.novice_total_multiplier:g}", f"${subtotal:.2f}"))

        # Any high-season day disqualifies the whole rental
        any_high_season = any(is_high_season(day) for day in quote.days)
        if len(quote.days) >= s.long_rental_min_days and not any_high_season:
            subtotal *= s.long_rental_multiplier
            trace.append(TraceStep("Long Rental", f"{len(quote.days)} low-season days, x{s.long_rental_multiplier:g}", f"${subtotal:.2f}"))

        return subtotal


def price(
    pickup_location: str,
    dropoff_location: str,
    pickup_date: Any,
    dropoff_date: Any,
    vehicle_type: Optional[str],
    age: int,
    license_years: Any = None,
    *,
    license_issued: Any = None,
) -> dict:
    """
    Quote a rental with the default settings.

    Args:
        pickup_location: Pickup location (not used for pricing)
        dropoff_location: Dropoff location (not used for pricing)
        pickup_date: date, datetime or parseable string
        dropoff_date: date, datetime or parseable string
        vehicle_type: Vehicle category name, matched case-insensitively
        age: Driver's age in years
        license_years: Years the driver has held a license (required unless
            license_issued is given)
        license_issued: License issue date, used to derive tenure at pickup

    Returns:
        {"success": True, "price": "$..."} or {"success": False, "error": "..."}
    """
    return PricingEngine().quote(
        pickup_location, dropoff_location, pickup_date, dropoff_date,
        vehicle_type, age, license_years, license_issued,
    )
