"""Meteor shower calendar and date matching.

Windows are stored as (month, day) pairs and interpreted against the year of
the queried date, so the calendar never needs yearly updates. Windows whose
start falls after their end run across New Year.
"""

from collections.abc import Iterable
from datetime import date, datetime, timedelta

from skyobserver.i18n import t
from skyobserver.models import MeteorShower, ShowerMatch

UPCOMING_DAYS = 30

METEOR_SHOWERS: tuple[MeteorShower, ...] = (
    MeteorShower(name="Quadrantids", start=(12, 28), end=(1, 12), peak=(1, 3)),
    MeteorShower(name="Lyrids", start=(4, 16), end=(4, 25), peak=(4, 22)),
    MeteorShower(name="Eta Aquariids", start=(4, 19), end=(5, 28), peak=(5, 6)),
    MeteorShower(name="Delta Aquariids", start=(7, 12), end=(8, 23), peak=(7, 30)),
    MeteorShower(name="Perseids", start=(7, 17), end=(8, 24), peak=(8, 12)),
    MeteorShower(name="Orionids", start=(10, 2), end=(11, 7), peak=(10, 21)),
    MeteorShower(name="Leonids", start=(11, 6), end=(11, 30), peak=(11, 17)),
    MeteorShower(name="Geminids", start=(12, 4), end=(12, 17), peak=(12, 14)),
    MeteorShower(name="Ursids", start=(12, 17), end=(1, 2), peak=(12, 22)),
)


def _as_date(on: date | datetime) -> date:
    return on.date() if isinstance(on, datetime) else on


def _month_day(value: tuple[int, int]) -> str:
    return f"{value[0]:02d}-{value[1]:02d}"


def shower_window_contains(shower: MeteorShower, on: date | datetime) -> bool:
    """True if ``on`` falls inside the shower's window (inclusive at both ends)."""
    key = (on.month, on.day)
    if shower.wraps_year:
        return key >= shower.start or key <= shower.end
    return shower.start <= key <= shower.end


def is_peak_day(shower: MeteorShower, on: date | datetime) -> bool:
    return (on.month, on.day) == shower.peak


def detect_showers(
    on: date | datetime, showers: Iterable[MeteorShower] = METEOR_SHOWERS
) -> tuple[ShowerMatch, ...]:
    """Showers whose window contains the given date, in calendar order."""
    day = _as_date(on)
    return tuple(
        ShowerMatch(shower=s, on=day, is_peak=is_peak_day(s, day))
        for s in showers
        if shower_window_contains(s, day)
    )


def next_peak(shower: MeteorShower, on: date | datetime) -> date:
    """Date of the shower's next peak on or after ``on``."""
    day = _as_date(on)
    month, dom = shower.peak
    for year in (day.year, day.year + 1, day.year + 2):
        try:
            candidate = date(year, month, dom)
        except ValueError:
            # Feb 29 peak in a common year
            continue
        if candidate >= day:
            return candidate
    raise ValueError(f"no upcoming peak for {shower.name}")


def upcoming_peaks(
    on: date | datetime,
    days: int = UPCOMING_DAYS,
    showers: Iterable[MeteorShower] = METEOR_SHOWERS,
) -> list[tuple[MeteorShower, date]]:
    """Showers peaking within ``days`` of ``on``, soonest first."""
    day = _as_date(on)
    horizon = day + timedelta(days=days)
    upcoming = [(s, next_peak(s, day)) for s in showers]
    return sorted(
        ((s, peak) for s, peak in upcoming if peak <= horizon),
        key=lambda item: item[1],
    )


def upcoming_events(
    on: date | datetime, lang: str = "en", days: int = UPCOMING_DAYS
) -> list[str]:
    """Descriptions of shower peaks after ``on`` and within ``days`` of it.

    A peak falling on ``on`` itself is left out; ``detect_showers`` already
    reports it as happening tonight.
    """
    day = _as_date(on)
    return [
        t("event_upcoming", lang).format(
            name=shower.name, date=peak.isoformat(), days=(peak - day).days
        )
        for shower, peak in upcoming_peaks(day, days)
        if peak > day
    ]


def get_shower_by_name(
    name: str, showers: Iterable[MeteorShower] = METEOR_SHOWERS
) -> MeteorShower | None:
    """Find a shower by name (case-insensitive partial match)."""
    key = name.casefold()
    for shower in showers:
        if key in shower.name.casefold():
            return shower
    return None


def describe_match(match: ShowerMatch, lang: str = "en") -> str:
    """Render a shower match as a one-line description."""
    shower = match.shower
    key = "event_peak" if match.is_peak else "event_active"
    return t(key, lang).format(
        name=shower.name,
        start=_month_day(shower.start),
        end=_month_day(shower.end),
        peak=_month_day(shower.peak),
    )


def describe_shower(
    shower: MeteorShower, on: date | datetime, lang: str = "en"
) -> str:
    """One-line summary of a shower's window and its next peak on or after ``on``."""
    return t("shower_summary", lang).format(
        name=shower.name,
        start=_month_day(shower.start),
        end=_month_day(shower.end),
        date=next_peak(shower, on).isoformat(),
    )
