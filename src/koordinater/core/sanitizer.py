"""
Configuration sanitizer.

Turns arbitrary, possibly stale or hand-edited configuration into a valid
``KoordinaterConfig``. Sanitization never raises: every invalid value
degrades to its default.
"""

import logging
import math
import re
from typing import Any, Iterable, List, Optional

from koordinater.core.catalog.pins import (
    DEFAULT_PIN_FILL_COLOR,
    DEFAULT_PIN_ICON_ID,
    is_pin_icon_id,
)
from koordinater.core.catalog.registry import (
    DEFAULT_SWEREF_WKID,
    DEFAULT_SWEREF_WKIDS,
    PRECISION_MAX,
    PRECISION_MIN,
    get_option,
    options_for_scope,
)
from koordinater.models.config import (
    CONFIG_FIELD_KEYS,
    KoordinaterConfig,
    PinIconId,
    StyleVariant,
)
from koordinater.utils.coercion import (
    clamp,
    coerce_boolean,
    read_config_value,
    to_array,
    to_int,
    to_number,
)

logger = logging.getLogger(__name__)

PIN_COLOR_HEX_PATTERN = re.compile(r"^#([0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)

DEFAULT_CONFIG = KoordinaterConfig(
    sweref_wkid=DEFAULT_SWEREF_WKID,
    precision=PRECISION_MIN,
    show_export_button=False,
    copy_on_click=False,
    enable_pin=True,
    include_extended_systems=False,
    enabled_wkids=DEFAULT_SWEREF_WKIDS,
    pin_fill_color=DEFAULT_PIN_FILL_COLOR,
    pin_icon_id=DEFAULT_PIN_ICON_ID,
    style_variant=StyleVariant.DEFAULT,
    show_projection_parameters=False,
)


def sanitize_precision(
    value: Any,
    fallback: Any = PRECISION_MIN,
    min_value: int = PRECISION_MIN,
    max_value: int = PRECISION_MAX,
) -> int:
    """
    Coerce a precision to an integer in [min_value, max_value].

    Args:
        value: Candidate precision
        fallback: Used when value is not numeric
        min_value: Lower bound
        max_value: Upper bound

    Returns:
        Floored and clamped precision
    """
    candidate = to_number(value)
    if candidate is None:
        candidate = to_number(fallback)
    if candidate is None:
        candidate = float(min_value)
    return int(clamp(math.floor(candidate), min_value, max_value))


def _normalize_hex(value: str) -> Optional[str]:
    trimmed = value.strip()
    if not trimmed:
        return None
    prefixed = trimmed if trimmed.startswith("#") else f"#{trimmed}"
    if not PIN_COLOR_HEX_PATTERN.match(prefixed):
        return None
    return prefixed.upper()


def sanitize_hex_color(value: Any, fallback: str = DEFAULT_PIN_FILL_COLOR) -> str:
    """
    Normalize a hex color to uppercase '#RRGGBB' or '#RRGGBBAA'.

    Invalid values fall back to the normalized fallback, then to black.
    """
    if isinstance(value, str):
        normalized = _normalize_hex(value)
        if normalized:
            return normalized
    if isinstance(fallback, str):
        normalized_fallback = _normalize_hex(fallback)
        if normalized_fallback:
            return normalized_fallback
    return DEFAULT_PIN_FILL_COLOR


def sanitize_pin_icon_id(value: Any, fallback: Optional[PinIconId] = None) -> PinIconId:
    """Return a known pin icon id, else the fallback, else the default icon."""
    if is_pin_icon_id(value):
        return PinIconId(value)
    if fallback is not None and is_pin_icon_id(fallback):
        return PinIconId(fallback)
    return DEFAULT_PIN_ICON_ID


def sanitize_wkid(value: Any, fallback: int) -> int:
    """Return value as a catalog WKID, or the fallback."""
    candidate = to_int(value)
    if candidate is None:
        return fallback
    option = get_option(candidate)
    return option.wkid if option else fallback


def sanitize_style_variant(value: Any, fallback: StyleVariant = StyleVariant.DEFAULT) -> StyleVariant:
    """Return a known style variant, or the fallback."""
    if isinstance(value, str) and value in [variant.value for variant in StyleVariant]:
        return StyleVariant(value)
    return fallback


def restrict_enabled_wkids(
    wkids: Optional[Iterable[Any]],
    include_extended: bool,
    allow_empty: bool = False,
) -> List[int]:
    """
    Restrict WKIDs to the catalog subset of a scope.

    Args:
        wkids: Numbers or numeric strings
        include_extended: Scope of allowed options
        allow_empty: If False, an empty result falls back to the whole scope

    Returns:
        Allowed WKIDs in catalog order
    """
    available = options_for_scope(include_extended)
    desired = set()
    for item in to_array(wkids):
        numeric = to_int(item)
        if numeric is not None:
            desired.add(numeric)

    restricted = [option.wkid for option in available if option.wkid in desired]
    if not restricted and not allow_empty:
        return [option.wkid for option in available]
    return restricted


def ensure_valid_wkid(wkid: int, allowed_wkids: Iterable[int]) -> int:
    """
    Keep wkid if it is allowed.

    Otherwise return the first allowed WKID, or the SWEREF 99 default when
    nothing is allowed.
    """
    allowed = list(allowed_wkids or ())
    if wkid in allowed:
        return wkid
    if allowed:
        return allowed[0]
    return DEFAULT_SWEREF_WKID


def _read(raw: Any, attribute: str) -> Any:
    return read_config_value(raw, CONFIG_FIELD_KEYS[attribute], attribute)


def sanitize_config(raw: Any = None) -> KoordinaterConfig:
    """
    Build a valid configuration from arbitrary input.

    Args:
        raw: None, a mapping, an object with ``get(key)``, or a KoordinaterConfig

    Returns:
        Fully valid KoordinaterConfig
    """
    if isinstance(raw, KoordinaterConfig):
        raw = raw.to_dict()

    base = DEFAULT_CONFIG

    include_extended = coerce_boolean(
        _read(raw, "include_extended_systems"), base.include_extended_systems
    )

    enabled_wkids = restrict_enabled_wkids(
        _read(raw, "enabled_wkids"), include_extended, allow_empty=False
    )

    sweref_wkid = ensure_valid_wkid(
        sanitize_wkid(_read(raw, "sweref_wkid"), DEFAULT_SWEREF_WKID),
        enabled_wkids,
    )

    config = KoordinaterConfig(
        sweref_wkid=sweref_wkid,
        precision=sanitize_precision(_read(raw, "precision"), base.precision),
        show_export_button=coerce_boolean(
            _read(raw, "show_export_button"), base.show_export_button
        ),
        copy_on_click=coerce_boolean(_read(raw, "copy_on_click"), base.copy_on_click),
        enable_pin=coerce_boolean(_read(raw, "enable_pin"), base.enable_pin),
        include_extended_systems=include_extended,
        enabled_wkids=tuple(enabled_wkids),
        pin_fill_color=sanitize_hex_color(_read(raw, "pin_fill_color"), base.pin_fill_color),
        pin_icon_id=sanitize_pin_icon_id(_read(raw, "pin_icon_id")),
        style_variant=sanitize_style_variant(_read(raw, "style_variant"), base.style_variant),
        show_projection_parameters=coerce_boolean(
            _read(raw, "show_projection_parameters"), base.show_projection_parameters
        ),
    )
    logger.debug(f"Sanitized configuration: {config.to_dict()}")
    return config
