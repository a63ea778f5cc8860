"""
Message catalogs for axis names, system labels and status messages.
"""

from typing import Callable, Dict, Optional

from koordinater.core.config import settings

Translate = Callable[[str], str]

NO_VALUE_MESSAGE_KEY = "noValue"

DEFAULT_LOCALE = "en"

MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        "title": "Coordinates",
        "noView": "No map view is connected",
        "noFormats": "No coordinate formats selected",
        "noValue": "No coordinates available",
        "clickMapToPlacePin": "Click the map to place a pin",
        "format": "Coordinate format",
        "export": "Export",
        "exportJson": "Export to JSON",
        "exportXml": "Export to XML",
        "exportYaml": "Export to YAML",
        "precision": "Decimals",
        "copy": "Copy",
        "copied": "Copied",
        "systemLabelSweref99": "SWEREF 99",
        "systemLabelRt90": "RT 90",
        "systemLabelWgs84": "WGS 84",
        "systemLabelEtrs89": "ETRS 89",
        "systemLabelItrf": "ITRF 2014",
        "easting": "E",
        "northing": "N",
        "latitude": "Lat",
        "longitude": "Lon",
        "pinIconClassicPin": "Classic pin",
        "pinIconTargetCircle": "Target",
        "pinIconDropMarker": "Drop marker",
        "pinIconBeaconPin": "Beacon",
        "pinIconRingPin": "Ring marker",
    },
    "sv": {
        "title": "Koordinater",
        "noView": "Ingen kartvy är ansluten",
        "noFormats": "Inga koordinatformat har valts",
        "noValue": "Inga koordinater tillgängliga",
        "clickMapToPlacePin": "Klicka på kartan för att placera en markör",
        "format": "Koordinatformat",
        "export": "Exportera",
        "exportJson": "Exportera till JSON",
        "exportXml": "Exportera till XML",
        "exportYaml": "Exportera till YAML",
        "precision": "Antal decimaler",
        "copy": "Kopiera",
        "copied": "Kopierat",
        "systemLabelSweref99": "SWEREF 99",
        "systemLabelRt90": "RT 90",
        "systemLabelWgs84": "WGS 84",
        "systemLabelEtrs89": "ETRS 89",
        "systemLabelItrf": "ITRF 2014",
        "easting": "E",
        "northing": "N",
        "latitude": "Lat",
        "longitude": "Lon",
        "pinIconClassicPin": "Klassisk kartnål",
        "pinIconTargetCircle": "Måltavla",
        "pinIconDropMarker": "Droppformad markör",
        "pinIconBeaconPin": "Fyrsymbol",
        "pinIconRingPin": "Ringformad markör",
    },
}


def resolve_translation(messages: Dict[str, str], key: str) -> str:
    """Resolve a key in a catalog, then the default catalog, then return the key."""
    value = messages.get(key) or MESSAGES[DEFAULT_LOCALE].get(key)
    return value if value else key


def get_translator(locale: Optional[str] = None) -> Translate:
    """
    Build a translate function for a locale.

    Args:
        locale: Locale code such as 'sv' or 'sv-SE'; defaults to settings.locale

    Returns:
        Function mapping message keys to text
    """
    code = (locale or settings.locale or DEFAULT_LOCALE).lower()
    messages = MESSAGES.get(code) or MESSAGES.get(code.split("-")[0]) or MESSAGES[DEFAULT_LOCALE]

    def translate(key: str) -> str:
        return resolve_translation(messages, key)

    return translate
