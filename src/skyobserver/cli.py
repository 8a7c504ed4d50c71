"""
Command-line sky report.

Usage:
    # Built-in city, current time
    skyobserver Çorlu

    # Any address, local civil time at that place
    skyobserver "Kadıköy, İstanbul" --when "2024-08-12 23:30"

    # Explicit coordinates (time is UTC), Turkish labels
    skyobserver --lat 41.145 --lon 27.408 --when "2024-01-25 18:00" --lang tr

    # Re-print every SKYOBSERVER_REFRESH_SECONDS until Ctrl+C
    skyobserver Edirne --watch

    # Window and next peak of one meteor shower
    skyobserver --shower perseids
"""
import argparse
import asyncio
import dataclasses
import sys
from datetime import datetime

from dotenv import load_dotenv
from pytz import utc
from skyfield.units import Angle

from skyobserver.compute import (
    GeocodingError,
    build_context,
    context_for_coordinates,
    resolve_location,
    snapshot_for,
)
from skyobserver.config import Settings
from skyobserver.errors import InvalidInputError
from skyobserver.events import UPCOMING_DAYS, describe_shower, get_shower_by_name
from skyobserver.i18n import LANGUAGES, t
from skyobserver.logging_config import LOG_LEVELS, setup_logging
from skyobserver.models import (
    ConstellationState,
    ObserverContext,
    QueryInput,
    SkySnapshot,
)
from skyobserver.refresh import SkyRefresher
from skyobserver.timescale import parse_when


def _angle(degrees: float) -> str:
    return Angle(degrees=degrees).dstr(places=0)


def _is_up(constellation: ConstellationState) -> bool:
    return any(
        line.from_.altitude > 0 or line.to.altitude > 0 for line in constellation.lines
    )


def format_report(snapshot: SkySnapshot, lang: str = "en") -> str:
    """Plain-text report of one snapshot."""
    ctx = snapshot.context
    when = ctx.utc_dt.strftime("%Y-%m-%d %H:%M UTC")
    lines = [t("report_title", lang).format(place=ctx.address_display, when=when), ""]

    lines.append(t("report_bodies", lang))
    for body in sorted(snapshot.bodies, key=lambda b: b.altitude, reverse=True):
        label = t(f"body_{body.name.lower()}", lang)
        row = (
            f"  {label:<10} alt {_angle(body.altitude):>16}  "
            f"az {_angle(body.azimuth):>16}  mag {body.magnitude:+.1f}"
        )
        if body.altitude < 0:
            row += f"  ({t('report_below_horizon', lang)})"
        lines.append(row)

    up = [c.name for c in snapshot.constellations if _is_up(c)]
    lines += ["", f"{t('report_constellations', lang)}: {', '.join(up) or '-'}"]

    moon = snapshot.moon
    lines += [
        "",
        t("report_moon", lang).format(
            emoji=moon.emoji,
            name=moon.phase_name,
            illumination=moon.illumination * 100,
            age=moon.age,
        ),
        "",
        t("report_events", lang),
    ]
    if snapshot.events:
        lines += [f"  {event}" for event in snapshot.events]
    else:
        lines.append(f"  {t('report_no_events', lang)}")

    lines += ["", t("report_upcoming", lang).format(days=UPCOMING_DAYS)]
    if snapshot.upcoming:
        lines += [f"  {event}" for event in snapshot.upcoming]
    else:
        no_upcoming = t("report_no_upcoming", lang).format(days=UPCOMING_DAYS)
        lines.append(f"  {no_upcoming}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skyobserver",
        description="Positions of the Sun, Moon, planets and bright constellations",
    )
    parser.add_argument(
        "place", nargs="?",
        help="Built-in city or any address (default: SKYOBSERVER_CITY)",
    )
    parser.add_argument(
        "--when",
        help='Local time "YYYY-MM-DD HH:MM" (UTC with --lat/--lon; default: now)',
    )
    parser.add_argument("--lat", type=float, help="Observer latitude, degrees north")
    parser.add_argument("--lon", type=float, help="Observer longitude, degrees east")
    parser.add_argument("--lang", choices=LANGUAGES, help="Report language")
    parser.add_argument(
        "--watch", action="store_true",
        help="Recompute every SKYOBSERVER_REFRESH_SECONDS until interrupted",
    )
    parser.add_argument(
        "--shower", metavar="NAME",
        help="Show one meteor shower's window and next peak, then exit",
    )
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Logging verbosity")
    return parser


def _resolve(args: argparse.Namespace, settings: Settings) -> ObserverContext:
    if args.lat is not None:
        when = parse_when(args.when) if args.when else datetime.now(utc)
        return context_for_coordinates(args.lat, args.lon, when, name=args.place)

    place = args.place or settings.city
    if args.when:
        query = QueryInput(place=place, when=args.when)
        return build_context(query, settings.user_agent)
    lat, lng, display = resolve_location(place, settings.user_agent)
    return ObserverContext(
        lat=lat, lng=lng, utc_dt=datetime.now(utc), address_display=display
    )


def _watch(
    context: ObserverContext, follow_clock: bool, lang: str, interval: float
) -> None:
    def compute() -> SkySnapshot:
        ctx = context
        if follow_clock:
            ctx = dataclasses.replace(context, utc_dt=datetime.now(utc))
        return snapshot_for(ctx, lang)

    def show(snapshot: SkySnapshot) -> None:
        print(format_report(snapshot, lang))
        print()

    refresher = SkyRefresher(compute, show, interval_sec=interval)
    print(f"Refreshing every {interval:g}s. Press Ctrl+C to stop.\n")
    try:
        asyncio.run(refresher.run_forever())
    except KeyboardInterrupt:
        print("\nStopped.")


def _show_shower(name: str, when: str | None, lang: str) -> int:
    shower = get_shower_by_name(name)
    if shower is None:
        print(t("error_shower", lang).format(name=name), file=sys.stderr)
        return 2
    try:
        on = parse_when(when) if when else datetime.now(utc)
    except InvalidInputError as e:
        print(t("error_input", lang).format(error=e), file=sys.stderr)
        return 2
    print(describe_shower(shower, on, lang))
    return 0


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)
    if (args.lat is None) != (args.lon is None):
        parser.error("--lat and --lon must be given together")

    try:
        settings = Settings.from_env()
    except InvalidInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    setup_logging(args.log_level or settings.log_level, settings.log_file)
    lang = args.lang or settings.lang

    if args.shower:
        return _show_shower(args.shower, args.when, lang)

    try:
        context = _resolve(args, settings)
        if args.watch:
            _watch(context, args.when is None, lang, settings.refresh_seconds)
        else:
            print(format_report(snapshot_for(context, lang), lang))
    except InvalidInputError as e:
        print(t("error_input", lang).format(error=e), file=sys.stderr)
        return 2
    except GeocodingError as e:
        print(t("error_location", lang).format(error=e), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
