"""Environment-driven settings.

Entry points call ``load_dotenv()`` first, so values may come from a ``.env``
file or the process environment.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from skyobserver.errors import InvalidInputError
from skyobserver.i18n import LANGUAGES

DEFAULT_CITY = "Çorlu"
DEFAULT_LANG = "en"
DEFAULT_REFRESH_SECONDS = 300.0  # five minutes
DEFAULT_USER_AGENT = "SkyObserver/1.0 (amateur sky observation log)"


@dataclass(frozen=True)
class Settings:
    """Runtime configuration."""

    city: str = DEFAULT_CITY
    lang: str = DEFAULT_LANG
    refresh_seconds: float = DEFAULT_REFRESH_SECONDS
    log_level: str = "INFO"
    log_file: Path | None = None
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        """Build settings from ``SKYOBSERVER_*`` variables.

        Args:
            environ: Mapping to read instead of ``os.environ`` (tests).

        Raises:
            InvalidInputError: On an unsupported language or a non-positive
                refresh interval.
        """
        env = os.environ if environ is None else environ

        lang = env.get("SKYOBSERVER_LANG", DEFAULT_LANG).strip().lower()
        if lang not in LANGUAGES:
            raise InvalidInputError(
                f"SKYOBSERVER_LANG must be one of {LANGUAGES}, got {lang!r}"
            )

        raw_refresh = env.get(
            "SKYOBSERVER_REFRESH_SECONDS", str(DEFAULT_REFRESH_SECONDS)
        )
        try:
            refresh_seconds = float(raw_refresh)
        except ValueError:
            raise InvalidInputError(
                f"SKYOBSERVER_REFRESH_SECONDS is not a number: {raw_refresh!r}"
            ) from None
        if not refresh_seconds > 0:
            raise InvalidInputError(
                f"SKYOBSERVER_REFRESH_SECONDS must be positive, got {refresh_seconds}"
            )

        log_file = env.get("SKYOBSERVER_LOG_FILE")
        return cls(
            city=env.get("SKYOBSERVER_CITY", DEFAULT_CITY),
            lang=lang,
            refresh_seconds=refresh_seconds,
            log_level=env.get("SKYOBSERVER_LOG_LEVEL", "INFO").upper(),
            log_file=Path(log_file) if log_file else None,
            user_agent=env.get("SKYOBSERVER_USER_AGENT", DEFAULT_USER_AGENT),
        )
