"""Measurement value types carrying both imperial and metric units.

Each type is built from its canonical (imperial) unit through a classmethod;
the metric value is computed once at construction.
"""

from dataclasses import dataclass

FEET_TO_METERS = 0.3048
INCHES_TO_MM = 25.4
MPH_TO_KPH = 1.60934

UNKNOWN = "Unknown"

CARDINALS: tuple[str, ...] = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)

WEATHER_DESCRIPTIONS: dict[int, str] = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Depositing rime fog",
    51: "Drizzle: Light intensity",
    53: "Drizzle: Moderate intensity",
    55: "Drizzle: Dense intensity",
    56: "Freezing Drizzle: Light intensity",
    57: "Freezing Drizzle: Dense intensity",
    61: "Rainfall: Slight intensity",
    63: "Rainfall: Moderate intensity",
    65: "Rainfall: Heavy intensity",
    66: "Freezing Rainfall: Light intensity",
    67: "Freezing Rainfall: Heavy intensity",
    71: "Snow fall: Slight intensity",
    73: "Snow fall: Moderate intensity",
    75: "Snow fall: Heavy intensity",
    77: "Snow grains",
    80: "Rainfall showers: Slight",
    81: "Rainfall showers: Moderate",
    82: "Rainfall showers: Violent",
    85: "Snow showers: Slight",
    86: "Snow showers: Heavy",
    95: "Thunderstorm: Slight or moderate",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
}


@dataclass(frozen=True)
class Temperature:
    fahrenheit: float
    celsius: float

    @classmethod
    def from_fahrenheit(cls, fahrenheit: float) -> "Temperature":
        return cls(fahrenheit=fahrenheit, celsius=(fahrenheit - 32) * 5 / 9)


@dataclass(frozen=True)
class Precipitation:
    inches: float
    millimeters: float

    @classmethod
    def from_inches(cls, inches: float) -> "Precipitation":
        return cls(inches=inches, millimeters=inches * INCHES_TO_MM)


@dataclass(frozen=True)
class WindSpeed:
    mph: float
    kph: float

    @classmethod
    def from_mph(cls, mph: float) -> "WindSpeed":
        return cls(mph=mph, kph=mph * MPH_TO_KPH)


@dataclass(frozen=True)
class Elevation:
    feet: float
    meters: float

    @classmethod
    def from_feet(cls, feet: float) -> "Elevation":
        return cls(feet=feet, meters=feet * FEET_TO_METERS)


@dataclass(frozen=True)
class SnowDepth:
    feet: float
    meters: float

    @classmethod
    def from_feet(cls, feet: float) -> "SnowDepth":
        return cls(feet=feet, meters=feet * FEET_TO_METERS)


@dataclass(frozen=True)
class WindDirection:
    degrees: float
    cardinal: str

    @classmethod
    def from_degrees(cls, degrees: float) -> "WindDirection":
        """Map degrees onto the 16-point compass.

        Each sector spans 22.5 degrees; adding half a sector rounds to the
        nearest point. Values outside [0, 360) yield degrees=-1, "Unknown".
        """
        if degrees < 0 or degrees >= 360:
            return cls(degrees=-1, cardinal=UNKNOWN)
        index = int(degrees / 22.5 + 0.5) % 16
        return cls(degrees=degrees, cardinal=CARDINALS[index])


@dataclass(frozen=True)
class Wind:
    speed: WindSpeed
    direction: WindDirection
    gusts: WindSpeed | None = None

    @classmethod
    def from_mph(
        cls, speed_mph: float, direction_degrees: float, gusts_mph: float | None = None
    ) -> "Wind":
        return cls(
            speed=WindSpeed.from_mph(speed_mph),
            direction=WindDirection.from_degrees(direction_degrees),
            gusts=WindSpeed.from_mph(gusts_mph) if gusts_mph is not None else None,
        )


@dataclass(frozen=True)
class Weather:
    code: int
    description: str

    @classmethod
    def from_code(cls, code: int) -> "Weather":
        return cls(code=code, description=WEATHER_DESCRIPTIONS.get(code, UNKNOWN))
