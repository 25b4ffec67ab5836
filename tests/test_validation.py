import pytest
import sys
import os
from datetime import date

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from rental_pricing.config.settings import PricingSettings
from rental_pricing.engine import CarType, QuoteError, QuoteRequest
from rental_pricing.engine.validation import QuoteValidationError, validate_request


def make_request(**overrides) -> QuoteRequest:
    fields = dict(
        pickup_location="A",
        dropoff_location="B",
        pickup_date="2025-06-01",
        dropoff_date="2025-06-02",
        vehicle_type="Compact",
        age=30,
        license_years=5,
    )
    fields.update(overrides)
    return QuoteRequest(**fields)


def rejection(request: QuoteRequest) -> QuoteError:
    with pytest.raises(QuoteValidationError) as exc_info:
        validate_request(request, PricingSettings())
    return exc_info.value.error


def test_valid_request_is_normalized():
    quote = validate_request(make_request(vehicle_type=" racer "), PricingSettings())
    assert quote.car_type is CarType.RACER
    assert quote.pickup == date(2025, 6, 1)
    assert quote.dropoff == date(2025, 6, 2)
    assert quote.days == [date(2025, 6, 1), date(2025, 6, 2)]
    assert quote.license_years == 5.0


@pytest.mark.parametrize("overrides,expected", [
    ({"pickup_date": "invalid"}, QuoteError.INVALID_DATES),
    ({"dropoff_date": None}, QuoteError.INVALID_DATES),
    ({"age": 17}, QuoteError.DRIVER_TOO_YOUNG),
    ({"age": 21, "vehicle_type": "Racer"}, QuoteError.RESTRICTED_TO_COMPACT),
    ({"age": 19, "vehicle_type": "bogus"}, QuoteError.RESTRICTED_TO_COMPACT),
    ({"pickup_date": "2025-06-10", "dropoff_date": "2025-06-05"}, QuoteError.INVALID_RENTAL_PERIOD),
    ({"license_years": None}, QuoteError.LICENSE_YEARS_REQUIRED),
    ({"license_years": "2010-01-01"}, QuoteError.LICENSE_YEARS_REQUIRED),
    ({"license_years": ""}, QuoteError.LICENSE_YEARS_REQUIRED),
    ({"license_years": 0}, QuoteError.LICENSE_TOO_NEW),
    ({"license_years": 0.9}, QuoteError.LICENSE_TOO_NEW),
])
def test_single_failures(overrides, expected):
    assert rejection(make_request(**overrides)) is expected


def test_error_values_are_caller_messages():
    assert QuoteError.DRIVER_TOO_YOUNG.value == 'Driver too young - cannot quote the price'
    assert QuoteError.RESTRICTED_TO_COMPACT.value == 'Drivers 21 y/o or less can only rent Compact vehicles'
    assert str(QuoteValidationError(QuoteError.INVALID_DATES)) == 'Invalid dates'


def test_first_failure_wins():
    """Checks run in a fixed order: dates, age, category, period, license."""
    assert rejection(make_request(pickup_date="invalid", age=15)) is QuoteError.INVALID_DATES
    assert rejection(make_request(age=17, vehicle_type="Racer")) is QuoteError.DRIVER_TOO_YOUNG
    assert rejection(make_request(
        age=20, vehicle_type="Racer", pickup_date="2025-06-10", dropoff_date="2025-06-05",
    )) is QuoteError.RESTRICTED_TO_COMPACT
    assert rejection(make_request(
        pickup_date="2025-06-10", dropoff_date="2025-06-05", license_years=None,
    )) is QuoteError.INVALID_RENTAL_PERIOD
    assert rejection(make_request(license_years="abc", age=40)) is QuoteError.LICENSE_YEARS_REQUIRED


@pytest.mark.parametrize("age,vehicle_type", [(18, "Compact"), (21, "compact"), (22, "Racer"), (22, "bogus")])
def test_age_boundaries_accepted(age, vehicle_type):
    quote = validate_request(make_request(age=age, vehicle_type=vehicle_type), PricingSettings())
    assert quote.age == age


def test_license_issue_date_derives_tenure_at_pickup():
    request = make_request(license_years=None, license_issued="2023-06-01")
    assert validate_request(request, PricingSettings()).license_years == 2.0

    # anniversary falls the day after pickup
    request = make_request(license_years=None, license_issued="2024-06-02")
    assert rejection(request) is QuoteError.LICENSE_TOO_NEW


def test_license_issue_date_unparseable_counts_as_missing():
    request = make_request(license_years=None, license_issued="someday")
    assert rejection(request) is QuoteError.LICENSE_YEARS_REQUIRED


def test_explicit_license_years_win_over_issue_date():
    request = make_request(license_years=10, license_issued="2025-01-01")
    assert validate_request(request, PricingSettings()).license_years == 10.0


def test_thresholds_come_from_settings():
    settings = PricingSettings(min_driver_age=25)
    with pytest.raises(QuoteValidationError) as exc_info:
        validate_request(make_request(age=24), settings)
    assert exc_info.value.error is QuoteError.DRIVER_TOO_YOUNG
