"""Default named forecast points for common backcountry locations."""

from summit.config.schema import NamedPoint

DEFAULT_POINTS: list[NamedPoint] = [
    NamedPoint(
        name="McClure Pass",
        slug="mcclure-pass",
        latitude=39.11539,
        longitude=-107.65840,
    ),
    NamedPoint(
        name="Mount Elbert",
        slug="mount-elbert",
        latitude=39.1178,
        longitude=-106.4452,
    ),
    NamedPoint(
        name="Berthoud Pass",
        slug="berthoud-pass",
        latitude=39.7983,
        longitude=-105.7772,
    ),
    NamedPoint(
        name="Alta",
        slug="alta",
        latitude=40.5884,
        longitude=-111.6386,
    ),
    NamedPoint(
        name="Stevens Pass",
        slug="stevens-pass",
        latitude=47.7448,
        longitude=-121.0890,
    ),
]
