"""Simple two-language (en/tr) translation helper."""

LANGUAGES = ("en", "tr")

_STRINGS: dict[str, dict[str, str]] = {
    "moon_phase_0": {
        "en": "New Moon",
        "tr": "Yeni Ay",
    },
    "moon_phase_1": {
        "en": "Waxing Crescent",
        "tr": "Ay Çıkışı",
    },
    "moon_phase_2": {
        "en": "First Quarter",
        "tr": "İlk Çeyrek",
    },
    "moon_phase_3": {
        "en": "Waxing Gibbous",
        "tr": "Dolunay Yakını",
    },
    "moon_phase_4": {
        "en": "Full Moon",
        "tr": "Dolunay",
    },
    "moon_phase_5": {
        "en": "Waning Gibbous",
        "tr": "Dolunay Kapanışı",
    },
    "moon_phase_6": {
        "en": "Last Quarter",
        "tr": "Son Çeyrek",
    },
    "moon_phase_7": {
        "en": "Waning Crescent",
        "tr": "Ay Batışı",
    },
    "event_peak": {
        "en": "{name} meteor shower peaks tonight ({start} – {end})",
        "tr": "{name} meteor yağmuru bu gece zirvede ({start} – {end})",
    },
    "event_active": {
        "en": "{name} meteor shower is active (peak {peak})",
        "tr": "{name} meteor yağmuru aktif (zirve {peak})",
    },
    "event_upcoming": {
        "en": "{name} peaks on {date} (in {days} days)",
        "tr": "{name} {date} tarihinde zirve yapacak ({days} gün sonra)",
    },
    "shower_summary": {
        "en": "{name}: active {start} – {end}, next peak {date}",
        "tr": "{name}: aktif {start} – {end}, sonraki zirve {date}",
    },
    "body_sun": {
        "en": "Sun",
        "tr": "Güneş",
    },
    "body_moon": {
        "en": "Moon",
        "tr": "Ay",
    },
    "body_mercury": {
        "en": "Mercury",
        "tr": "Merkür",
    },
    "body_venus": {
        "en": "Venus",
        "tr": "Venüs",
    },
    "body_mars": {
        "en": "Mars",
        "tr": "Mars",
    },
    "body_jupiter": {
        "en": "Jupiter",
        "tr": "Jüpiter",
    },
    "body_saturn": {
        "en": "Saturn",
        "tr": "Satürn",
    },
    "report_title": {
        "en": "Sky over {place} at {when}",
        "tr": "{place} üzerindeki gökyüzü, {when}",
    },
    "report_bodies": {
        "en": "Bodies",
        "tr": "Gök cisimleri",
    },
    "report_below_horizon": {
        "en": "below horizon",
        "tr": "ufkun altında",
    },
    "report_constellations": {
        "en": "Constellations",
        "tr": "Takımyıldızlar",
    },
    "report_moon": {
        "en": "Moon: {emoji} {name}, {illumination:.0f}% lit, {age:.1f} days old",
        "tr": "Ay: {emoji} {name}, %{illumination:.0f} aydınlık, {age:.1f} günlük",
    },
    "report_events": {
        "en": "Sky events",
        "tr": "Gökyüzü olayları",
    },
    "report_no_events": {
        "en": "No meteor showers active.",
        "tr": "Aktif meteor yağmuru yok.",
    },
    "report_upcoming": {
        "en": "Upcoming peaks (next {days} days)",
        "tr": "Yaklaşan zirveler (önümüzdeki {days} gün)",
    },
    "report_no_upcoming": {
        "en": "No shower peaks in the next {days} days.",
        "tr": "Önümüzdeki {days} günde zirve yapan meteor yağmuru yok.",
    },
    "error_location": {
        "en": "Location not found: {error}",
        "tr": "Konum bulunamadı: {error}",
    },
    "error_shower": {
        "en": "Unknown meteor shower: {name}",
        "tr": "Bilinmeyen meteor yağmuru: {name}",
    },
    "error_input": {
        "en": "Invalid input: {error}",
        "tr": "Geçersiz giriş: {error}",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
