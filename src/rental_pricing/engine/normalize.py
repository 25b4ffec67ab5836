"""
Input normalization for free-form request fields.
"""
import math
from typing import Any, Optional

import pandas as pd

from .models import CarType, KNOWN_CAR_TYPES


def normalize_car_type(value: Any) -> CarType:
    """
    Canonicalize a vehicle type string.
    
    Trims whitespace and capitalizes ("  rACER " → Racer). Anything that is not
    exactly one of the known categories maps to CarType.UNKNOWN.
    """
    if isinstance(value, CarType):
        return value
    if not value:
        return CarType.UNKNOWN
    
    cleaned = str(value).strip().capitalize()
    for car_type in KNOWN_CAR_TYPES:
        if car_type.value == cleaned:
            return car_type
    return CarType.UNKNOWN


def parse_license_years(value: Any) -> Optional[float]:
    """
    Parse license tenure in years.
    
    Returns None for missing, blank or non-numeric input. Booleans count as
    1 and 0.
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    
    try:
        years = float(pd.to_numeric(value, errors='coerce'))
    except (TypeError, ValueError):
        return None
    if math.isnan(years):
        return None
    return years
