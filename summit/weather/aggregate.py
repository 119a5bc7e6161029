"""Daily statistics over hourly sub-series."""

from summit.models.model_values import ModelValues
from summit.models.units import Precipitation

# Returned by min_value/max_value for an empty range. Not a measurement.
EMPTY_RANGE_SENTINEL = -1.0


def min_value(values: list[float]) -> float:
    if not values:
        return EMPTY_RANGE_SENTINEL
    lowest = values[0]
    for v in values:
        if v < lowest:
            lowest = v
    return lowest


def max_value(values: list[float]) -> float:
    if not values:
        return EMPTY_RANGE_SENTINEL
    highest = values[0]
    for v in values:
        if v > highest:
            highest = v
    return highest


def sum_values(values: list[float]) -> float:
    total = 0.0
    for v in values:
        total += v
    return total


def liquid_precipitation(
    rain: ModelValues[Precipitation], showers: ModelValues[Precipitation]
) -> ModelValues[Precipitation]:
    """Rain plus showers, for models present in both maps."""
    liquid: ModelValues[Precipitation] = ModelValues()
    for model, rain_amount in rain.items():
        shower_amount = showers.get_for_model(model)
        if shower_amount is None:
            continue
        liquid[model] = Precipitation.from_inches(
            rain_amount.inches + shower_amount.inches
        )
    return liquid
