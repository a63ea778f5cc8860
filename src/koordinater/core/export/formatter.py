"""
Display and clipboard formatting of projection snapshots.
"""

import locale
import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Callable, Iterable, Optional

from koordinater.core.catalog.registry import GEODETIC_MINIMUM_PRECISION, PRECISION_MAX, PRECISION_MIN
from koordinater.core.errors import TranslationMissingError
from koordinater.core.translations import NO_VALUE_MESSAGE_KEY
from koordinater.models.coordinates import AxisKind, CoordinateOption, ExportProjectionSnapshot
from koordinater.utils.coercion import clamp, to_number

Translate = Callable[[str], str]

# Narrow no-break space between an axis label and its value
LABEL_VALUE_SEPARATOR = "\u202f"

# Wide enough to quantize any finite float to PRECISION_MAX decimals
_ROUNDING_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def _sanitize_precision(value: object) -> int:
    number = to_number(value)
    if number is None:
        return PRECISION_MIN
    return int(clamp(math.floor(number), PRECISION_MIN, PRECISION_MAX))


def round_half_up(value: float, precision: int) -> Decimal:
    """
    Round a finite number to a fixed number of decimals, ties away from zero.

    The exact binary value is rounded, so 0.125 becomes 0.13 while 1.005
    (stored just below) becomes 1.00.

    Args:
        value: Finite number
        precision: Number of decimals

    Returns:
        Decimal with exactly ``precision`` fraction digits
    """
    exponent = Decimal(1).scaleb(-precision)
    return Decimal(value).quantize(exponent, context=_ROUNDING_CONTEXT)


def resolve_precision(option: Optional[CoordinateOption], configured_precision: object) -> int:
    """
    Resolve the number of decimals for an option.

    Args:
        option: Target coordinate option, if known
        configured_precision: Configured decimals (any value)

    Returns:
        Precision in 0-6; geodetic options get at least 5 decimals
    """
    precision = _sanitize_precision(configured_precision)
    if option is not None and option.is_geodetic:
        return max(precision, GEODETIC_MINIMUM_PRECISION)
    return precision


def resolve_precision_for_axes(axes: Iterable[AxisKind], configured_precision: object) -> int:
    """Resolve the number of decimals for an axis pair."""
    precision = _sanitize_precision(configured_precision)
    if any(AxisKind(axis).is_geodetic for axis in axes):
        return max(precision, GEODETIC_MINIMUM_PRECISION)
    return precision


def format_number(value: float, precision: int, empty_text: str) -> str:
    """
    Format a number with fixed decimals and no thousands grouping.

    Uses the process locale's decimal separator and falls back to plain
    fixed-decimal text when locale formatting fails.

    Args:
        value: Number to format
        precision: Number of decimals
        empty_text: Text returned for non-finite values

    Returns:
        Formatted number or empty_text
    """
    if value is None or not math.isfinite(value):
        return empty_text
    rounded = round_half_up(value, precision)
    try:
        return locale.format_string(f"%.{precision}f", float(rounded), grouping=False)
    except (ValueError, TypeError):
        return format(rounded, "f")


def axis_label(axis: AxisKind, translate: Translate) -> str:
    """Translated axis name, or the axis kind when no translation exists."""
    label = translate(axis.value)
    return label if label and label != axis.value else axis.value


def resolve_empty_text(translate: Translate) -> str:
    """
    Resolve the "no value" placeholder.

    Raises:
        TranslationMissingError: If the translation is missing
    """
    empty_text = translate(NO_VALUE_MESSAGE_KEY)
    if not empty_text or empty_text == NO_VALUE_MESSAGE_KEY:
        raise TranslationMissingError(NO_VALUE_MESSAGE_KEY)
    return empty_text


def format_display(
    snapshot: ExportProjectionSnapshot, precision: int, translate: Translate
) -> str:
    """
    Format a snapshot for display, e.g. 'N: 6581234.57, E: 674032.12'.

    Args:
        snapshot: Projection snapshot
        precision: Resolved precision
        translate: Translation function for axis names and the placeholder

    Returns:
        Display text with a narrow no-break space after each label

    Raises:
        TranslationMissingError: If the "no value" translation is missing
    """
    empty_text = resolve_empty_text(translate)
    first = format_number(snapshot.first_value, precision, empty_text)
    second = format_number(snapshot.second_value, precision, empty_text)
    first_label = axis_label(snapshot.first_axis, translate)
    second_label = axis_label(snapshot.second_axis, translate)
    return (
        f"{first_label}:{LABEL_VALUE_SEPARATOR}{first}, "
        f"{second_label}:{LABEL_VALUE_SEPARATOR}{second}"
    )


def format_clipboard(snapshot: ExportProjectionSnapshot, precision: int) -> Optional[str]:
    """
    Format a snapshot as plain clipboard text, e.g. '6581234.57,674032.12'.

    Returns:
        Clipboard text, or None if either value is not finite
    """
    if not (math.isfinite(snapshot.first_value) and math.isfinite(snapshot.second_value)):
        return None
    first = format(round_half_up(snapshot.first_value, precision), "f")
    second = format(round_half_up(snapshot.second_value, precision), "f")
    return f"{first},{second}"


def is_valid_clipboard_text(value: Optional[str], empty_text: str) -> bool:
    """Check whether text is worth copying (not empty, not the placeholder)."""
    if not isinstance(value, str) or not value:
        return False
    return value != empty_text
