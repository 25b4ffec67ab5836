"""Engine subpackage - quote validation and pricing logic."""
from .pricing_engine import PricingEngine, price
from .models import QuoteRequest, QuoteResult, DayCharge, CarType, QuoteError
from .calendar_utils import is_weekend, is_high_season, days_between_inclusive, years_between
from .normalize import normalize_car_type
from .formatting import format_currency

__all__ = [
    'PricingEngine', 'price',
    'QuoteRequest', 'QuoteResult', 'DayCharge', 'CarType', 'QuoteError',
    'is_weekend', 'is_high_season', 'days_between_inclusive', 'years_between',
    'normalize_car_type', 'format_currency',
]
