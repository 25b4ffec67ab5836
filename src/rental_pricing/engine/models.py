"""
Data models for the rental pricing engine.

Uses dataclasses for requests and results, and str-valued enums for the
closed sets of vehicle categories and failure messages.
"""
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Optional


class CarType(str, Enum):
    """Recognized vehicle categories, plus the Unknown fallback."""
    COMPACT = "Compact"
    ELECTRIC = "Electric"
    CABRIO = "Cabrio"
    RACER = "Racer"
    UNKNOWN = "Unknown"


KNOWN_CAR_TYPES = frozenset(t for t in CarType if t is not CarType.UNKNOWN)


class QuoteError(str, Enum):
    """Validation failures; the value is the message returned to callers."""
    INVALID_DATES = "Invalid dates"
    DRIVER_TOO_YOUNG = "Driver too young - cannot quote the price"
    RESTRICTED_TO_COMPACT = "Drivers 21 y/o or less can only rent Compact vehicles"
    INVALID_RENTAL_PERIOD = "Invalid rental period"
    LICENSE_YEARS_REQUIRED = "Driver license years required"
    LICENSE_TOO_NEW = "Driver must have a license for at least 1 year"


@dataclass
class TraceStep:
    """A single step in the pricing trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass
class QuoteRequest:
    """A quote request as received from the caller."""
    pickup_location: str
    dropoff_location: str
    pickup_date: Any  # date, datetime, Timestamp or parseable string
    dropoff_date: Any
    vehicle_type: Optional[str]
    age: int  # required number; not coerced
    license_years: Any = None  # int, float or numeric string

    # Tenure is derived from this when license_years is not given
    license_issued: Any = None


@dataclass
class DayCharge:
    """Price contribution of one rental day."""
    day: date
    base: float
    price: float
    weekend: bool
    high_season: bool
    adjustments: list[str] = field(default_factory=list)
    trace: list[TraceStep] = field(default_factory=list)

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the trace for this day."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def get_trace_text(self) -> str:
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"→ {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"→ {t.step}: {t.description}")
        return "\n".join(lines)


@dataclass
class QuoteResult:
    """
    Outcome of a quote: either a formatted price or an error message.

    Exactly one of `price` and `error` is set.
    """
    success: bool
    price: Optional[str] = None
    error: Optional[str] = None
    subtotal: Optional[float] = None
    days: list[DayCharge] = field(default_factory=list)
    trace: list[TraceStep] = field(default_factory=list)

    @classmethod
    def ok(cls, price: str, subtotal: float, days: list[DayCharge], trace: list[TraceStep]) -> 'QuoteResult':
        return cls(success=True, price=price, subtotal=subtotal, days=days, trace=trace)

    @classmethod
    def failed(cls, error: QuoteError) -> 'QuoteResult':
        return cls(success=False, error=error.value)

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the result-level trace."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def get_trace_text(self) -> str:
        """Get human-readable trace covering every day and the rental totals."""
        lines = []
        for charge in self.days:
            lines.append(f"{charge.day.isoformat()}:")
            lines.append(charge.get_trace_text())
        for t in self.trace:
            if t.value:
                lines.append(f"• {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"• {t.step}: {t.description}")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Convert to the caller-facing success/price or success/error dict."""
        if self.success:
            return {"success": True, "price": self.price}
        return {"success": False, "error": self.error}
