"""Application layer: place lookup, local-time conversion and snapshot assembly.

The engine itself never touches the network or time zones; this module turns
a raw QueryInput into an ObserverContext (lat/lng + UTC instant) and hands
that to the pure entry points in ``skyobserver.engine``.
"""

from datetime import datetime
from functools import lru_cache

import httpx
from pytz import timezone, utc
from pytz.exceptions import InvalidTimeError
from timezonefinder import TimezoneFinder

from skyobserver.cities import custom_city, find_city
from skyobserver.config import DEFAULT_USER_AGENT
from skyobserver.coordinates import validate_observer
from skyobserver.engine import compute_sky
from skyobserver.errors import InvalidInputError
from skyobserver.events import upcoming_events
from skyobserver.logging_config import get_logger
from skyobserver.models import ObserverContext, QueryInput, SkySnapshot
from skyobserver.timescale import parse_when

logger = get_logger(__name__)

NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"


class GeocodingError(Exception):
    """Geocoder or timezone lookup failure."""


@lru_cache(maxsize=1)
def _timezone_finder() -> TimezoneFinder:
    return TimezoneFinder()


def _geocode_nominatim(
    address: str, user_agent: str
) -> tuple[float, float, str] | None:
    """Nominatim (OpenStreetMap) geocoder. Returns (lat, lng, display_name) or None."""
    params = {"q": address, "format": "json", "limit": 1}
    headers = {"User-Agent": user_agent}
    try:
        resp = httpx.get(NOMINATIM_URL, params=params, headers=headers, timeout=10)
        resp.raise_for_status()
    except httpx.HTTPError as exc:
        raise GeocodingError(f"geocoder request failed: {exc}") from exc
    results = resp.json()
    if not results:
        return None
    r = results[0]
    return float(r["lat"]), float(r["lon"]), r["display_name"]


def resolve_location(
    place: str, user_agent: str = DEFAULT_USER_AGENT
) -> tuple[float, float, str]:
    """Resolve a place name to (lat, lng, display name).

    Built-in cities are matched first (no network). Anything else goes to
    Nominatim.

    Raises:
        GeocodingError: On API error or when the place cannot be found.
    """
    city = find_city(place)
    if city is not None:
        return city.latitude, city.longitude, city.name

    logger.info("'%s' is not a built-in city, querying Nominatim", place)
    result = _geocode_nominatim(place, user_agent)
    if result is None:
        raise GeocodingError(f"Address not found: {place}")
    return result


def localize(when: str, lat: float, lng: float) -> datetime:
    """Interpret a local "YYYY-MM-DD HH:MM" string at (lat, lng) and return UTC.

    Raises:
        InvalidInputError: Malformed time, or a wall-clock time that does not
            exist / is ambiguous across a DST change.
        GeocodingError: If no timezone covers the coordinates.
    """
    dt = parse_when(when)
    tz_str = _timezone_finder().timezone_at(lat=lat, lng=lng)
    if tz_str is None:
        raise GeocodingError(f"Timezone not found: lat={lat}, lng={lng}")
    local_tz = timezone(tz_str)
    try:
        return local_tz.localize(dt, is_dst=None).astimezone(utc)
    except InvalidTimeError as exc:
        raise InvalidInputError(
            f"{when} is not a valid local time in {tz_str}"
        ) from exc
    except OverflowError as exc:
        raise InvalidInputError(f"{when} in {tz_str} is out of range in UTC") from exc


def build_context(
    query: QueryInput, user_agent: str = DEFAULT_USER_AGENT
) -> ObserverContext:
    """Resolve a QueryInput (place + local time string) to an ObserverContext.

    Args:
        query: Built-in city name or any address, and a local
            "YYYY-MM-DD HH:MM" time string.
        user_agent: User-Agent sent to Nominatim.

    Raises:
        GeocodingError: On API error or when the place cannot be found.
        InvalidInputError: On a malformed time string.
    """
    lat, lng, address_display = resolve_location(query.place, user_agent)
    return ObserverContext(
        lat=lat,
        lng=lng,
        utc_dt=localize(query.when, lat, lng),
        address_display=address_display,
    )


def context_for_coordinates(
    lat: float, lng: float, utc_dt: datetime, name: str | None = None
) -> ObserverContext:
    """ObserverContext for explicit coordinates; ``utc_dt`` is taken as UTC.

    Raises:
        InvalidInputError: Out-of-range coordinates.
    """
    validate_observer(lat, lng)
    if utc_dt.tzinfo is None:
        utc_dt = utc.localize(utc_dt)
    try:
        utc_dt = utc_dt.astimezone(utc)
    except OverflowError as exc:
        raise InvalidInputError(f"timestamp out of range in UTC: {utc_dt}") from exc
    display = name or custom_city(lat, lng).name
    return ObserverContext(lat=lat, lng=lng, utc_dt=utc_dt, address_display=display)


def snapshot_for(context: ObserverContext, lang: str = "en") -> SkySnapshot:
    """Run the engine for a resolved context."""
    bodies, constellations, moon, events = compute_sky(
        context.utc_dt, context.lat, context.lng, lang
    )
    return SkySnapshot(
        context=context,
        bodies=tuple(bodies),
        constellations=tuple(constellations),
        moon=moon,
        events=tuple(events),
        upcoming=tuple(upcoming_events(context.utc_dt, lang)),
    )


def run(
    query: QueryInput, lang: str = "en", user_agent: str = DEFAULT_USER_AGENT
) -> SkySnapshot:
    """Top-level entry point: takes a QueryInput and returns a SkySnapshot.

    Args:
        query: User input (place, local time string).
        lang: Language code ('en' or 'tr') for phase names and events.
        user_agent: User-Agent sent to Nominatim.
    """
    context = build_context(query, user_agent=user_agent)
    return snapshot_for(context, lang)
