"""
Quote request validation.

Checks run in a fixed order and the first failure wins. Failures are raised
as QuoteValidationError and turned into a failed QuoteResult by the engine.
"""
from dataclasses import dataclass
from datetime import date

from ..config.settings import PricingSettings
from .calendar_utils import to_calendar_date, days_between_inclusive, years_between
from .models import CarType, QuoteError, QuoteRequest
from .normalize import normalize_car_type, parse_license_years


class QuoteValidationError(Exception):
    """Raised when a quote request fails an eligibility or input check."""

    def __init__(self, error: QuoteError):
        super().__init__(error.value)
        self.error = error


@dataclass(frozen=True)
class ValidatedQuote:
    """A request that passed every check, with its inputs normalized."""
    car_type: CarType
    age: int
    pickup: date
    dropoff: date
    days: list[date]
    license_years: float


def _resolve_license_years(request: QuoteRequest, pickup: date):
    """Explicit tenure wins; otherwise derive it from the issue date."""
    if request.license_years is not None:
        return parse_license_years(request.license_years)
    issued = to_calendar_date(request.license_issued)
    if issued is None:
        return None
    return float(years_between(issued, pickup))


def validate_request(request: QuoteRequest, settings: PricingSettings) -> ValidatedQuote:
    """
    Validate a quote request.

    Order:
    1. Pickup and dropoff must parse as dates
    2. Driver must be old enough to rent at all
    3. Young drivers are restricted to Compact
    4. Pickup must not be after dropoff
    5. License tenure must be given
    6. License tenure must meet the minimum

    Raises:
        QuoteValidationError: on the first failed check
    """
    car_type = normalize_car_type(request.vehicle_type)
    pickup = to_calendar_date(request.pickup_date)
    dropoff = to_calendar_date(request.dropoff_date)

    if pickup is None or dropoff is None:
        raise QuoteValidationError(QuoteError.INVALID_DATES)

    age = request.age
    if age < settings.min_driver_age:
        raise QuoteValidationError(QuoteError.DRIVER_TOO_YOUNG)
    if age <= settings.compact_only_max_age and car_type is not CarType.COMPACT:
        raise QuoteValidationError(QuoteError.RESTRICTED_TO_COMPACT)

    days = days_between_inclusive(pickup, dropoff)
    if not days:
        raise QuoteValidationError(QuoteError.INVALID_RENTAL_PERIOD)

    license_years = _resolve_license_years(request, pickup)
    if license_years is None:
        raise QuoteValidationError(QuoteError.LICENSE_YEARS_REQUIRED)
    if license_years < settings.min_license_years:
        raise QuoteValidationError(QuoteError.LICENSE_TOO_NEW)

    return ValidatedQuote(
        car_type=car_type,
        age=age,
        pickup=pickup,
        dropoff=dropoff,
        days=days,
        license_years=license_years,
    )
