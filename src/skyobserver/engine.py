"""Positional astronomy engine: the four pure entry points.

Every function here is a deterministic function of its arguments and the
static catalogs. Input is validated eagerly; after that, each body and each
constellation is computed independently so an arithmetic or math-domain
fault in one item only drops that item.
"""

import math
from datetime import datetime

from skyobserver.constellations import CONSTELLATIONS, project_constellation
from skyobserver.coordinates import equatorial_to_horizontal, validate_observer
from skyobserver.events import describe_match, detect_showers
from skyobserver.logging_config import get_logger
from skyobserver.lunar import moon_magnitude, moon_position
from skyobserver.models import (
    BodyType,
    CelestialBody,
    ConstellationCatalogEntry,
    ConstellationState,
    MoonData,
)
from skyobserver.moonphase import moon_phase_from_elongation
from skyobserver.planets import NAKED_EYE_PLANETS, planet_position
from skyobserver.sidereal import local_sidereal_time
from skyobserver.solar import sun_position
from skyobserver.timescale import julian_centuries, julian_date

logger = get_logger(__name__)

SUN_MAGNITUDE = -26.74

BODY_COLORS: dict[str, str] = {
    "Sun": "#FDB813",
    "Moon": "#F4F6F0",
    "Mercury": "#B1ADAD",
    "Venus": "#E6C27A",
    "Mars": "#C1440E",
    "Jupiter": "#D8CA9D",
    "Saturn": "#E3C16F",
}

# Math-domain failures (math.acos and friends) surface as ValueError
_ISOLATED_ERRORS = (ArithmeticError, ValueError)


def _frame(
    timestamp: datetime, latitude: float, longitude: float
) -> tuple[float, float]:
    """Validate inputs and return (T, LST in degrees)."""
    validate_observer(latitude, longitude)
    jd = julian_date(timestamp)
    return julian_centuries(jd), local_sidereal_time(jd, longitude)


def _sun(t: float, lst: float, latitude: float) -> CelestialBody:
    sun = sun_position(t)
    pos = equatorial_to_horizontal(sun.equatorial.ra, sun.equatorial.dec, lst, latitude)
    return CelestialBody(
        name="Sun",
        type=BodyType.SUN,
        azimuth=pos.azimuth,
        altitude=pos.altitude,
        distance=sun.distance_au,
        magnitude=SUN_MAGNITUDE,
        color=BODY_COLORS["Sun"],
    )


def _moon(t: float, lst: float, latitude: float) -> CelestialBody:
    moon = moon_position(t)
    eq = moon.equatorial
    pos = equatorial_to_horizontal(eq.ra, eq.dec, lst, latitude)
    # Geocentric → topocentric: the Moon sits lower by parallax·cos(alt)
    altitude = pos.altitude - moon.parallax * math.cos(math.radians(pos.altitude))
    return CelestialBody(
        name="Moon",
        type=BodyType.MOON,
        azimuth=pos.azimuth,
        altitude=max(-90.0, min(90.0, altitude)),
        distance=moon.distance_km,
        magnitude=moon_magnitude(moon.elongation),
        color=BODY_COLORS["Moon"],
    )


def _planet(name: str, t: float, lst: float, latitude: float) -> CelestialBody:
    planet = planet_position(name, t)
    eq = planet.equatorial
    pos = equatorial_to_horizontal(eq.ra, eq.dec, lst, latitude)
    return CelestialBody(
        name=name,
        type=BodyType.PLANET,
        azimuth=pos.azimuth,
        altitude=pos.altitude,
        distance=planet.geocentric_distance,
        magnitude=planet.magnitude,
        color=BODY_COLORS[name],
    )


def _bodies(t: float, lst: float, latitude: float) -> list[CelestialBody]:
    builders = [
        ("Sun", lambda: _sun(t, lst, latitude)),
        ("Moon", lambda: _moon(t, lst, latitude)),
    ]
    builders += [
        (name, lambda name=name: _planet(name, t, lst, latitude))
        for name in NAKED_EYE_PLANETS
    ]

    bodies: list[CelestialBody] = []
    for name, build in builders:
        try:
            bodies.append(build())
        except _ISOLATED_ERRORS as exc:
            # NonConvergenceError included; the body is left out, the rest continue
            logger.warning("Omitting %s from results: %s", name, exc)
    return bodies


def _constellations(
    lst: float, latitude: float, catalog: tuple[ConstellationCatalogEntry, ...]
) -> list[ConstellationState]:
    states: list[ConstellationState] = []
    for entry in catalog:
        try:
            states.append(project_constellation(entry, lst, latitude))
        except _ISOLATED_ERRORS as exc:
            logger.warning("Omitting constellation %s: %s", entry.name, exc)
    return states


def compute_bodies(
    timestamp: datetime, latitude: float, longitude: float
) -> list[CelestialBody]:
    """Sky positions of the Sun, Moon and naked-eye planets.

    Bodies below the horizon are included with negative altitude.

    Args:
        timestamp: Instant of observation (naive = already UT).
        latitude: Observer latitude (degrees, north positive).
        longitude: Observer longitude (degrees, east positive).

    Raises:
        InvalidInputError: Malformed timestamp or out-of-range coordinates.
    """
    t, lst = _frame(timestamp, latitude, longitude)
    bodies = _bodies(t, lst, latitude)
    logger.debug("Computed %d bodies for T=%.8f, LST=%.4f", len(bodies), t, lst)
    return bodies


def compute_constellations(
    timestamp: datetime,
    latitude: float,
    longitude: float,
    catalog: tuple[ConstellationCatalogEntry, ...] = CONSTELLATIONS,
) -> list[ConstellationState]:
    """Projected stick figures of every catalog constellation, unfiltered.

    Raises:
        InvalidInputError: Malformed timestamp or out-of-range coordinates.
    """
    _, lst = _frame(timestamp, latitude, longitude)
    return _constellations(lst, latitude, catalog)


def compute_moon_phase(timestamp: datetime, lang: str = "en") -> MoonData:
    """Phase name, illumination, age and glyph of the Moon.

    Raises:
        InvalidInputError: Malformed timestamp.
    """
    t = julian_centuries(julian_date(timestamp))
    return moon_phase_from_elongation(moon_position(t).elongation, lang)


def compute_sky_events(
    timestamp: datetime, latitude: float, longitude: float, lang: str = "en"
) -> list[str]:
    """Descriptions of the meteor showers active on the timestamp's date.

    Latitude/longitude are validated but do not yet affect the result.

    Raises:
        InvalidInputError: Malformed timestamp or out-of-range coordinates.
    """
    validate_observer(latitude, longitude)
    julian_date(timestamp)
    return [describe_match(match, lang) for match in detect_showers(timestamp)]


def compute_sky(
    timestamp: datetime, latitude: float, longitude: float, lang: str = "en"
) -> tuple[list[CelestialBody], list[ConstellationState], MoonData, list[str]]:
    """All four result sets for one query, sharing the time/sidereal frame.

    Returns:
        (bodies, constellations, moon data, sky events)
    """
    t, lst = _frame(timestamp, latitude, longitude)
    bodies = _bodies(t, lst, latitude)
    constellations = _constellations(lst, latitude, CONSTELLATIONS)
    moon = moon_phase_from_elongation(moon_position(t).elongation, lang)
    events = [describe_match(match, lang) for match in detect_showers(timestamp)]
    logger.debug(
        "Sky computed: %d bodies, %d constellations, %d events",
        len(bodies),
        len(constellations),
        len(events),
    )
    return bodies, constellations, moon, events
