"""JSON interchange for angles.

Angles serialize structurally as their unit tag plus scalar, e.g.
``{"unit": "degrees", "value": 90}``. Array angles carry nested lists. A
sequence of angles serializes as a JSON list of such objects.

Functions:
    to_json: Encode one angle or a sequence of angles.
    from_json: Decode what to_json produced.

Example:
    >>> from angular_units import Degrees
    >>> text = to_json(Degrees(90))
    >>> text
    '{"unit": "degrees", "value": 90}'
    >>> from_json(text)
    Degrees(90)
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from fractions import Fraction

from .unit_angle import Angle

logger = logging.getLogger(__name__)


def _encode_default(obj):
    if isinstance(obj, Fraction):
        return float(obj)
    msg = f"Object of type {type(obj).__name__} is not JSON serializable"
    raise TypeError(msg)


def to_json(angles: Angle | Sequence[Angle], **kwargs) -> str:
    """Encode an angle, or a sequence of angles, as JSON text.

    Args:
        angles: A single angle or a sequence of them.
        **kwargs: Passed through to ``json.dumps`` (e.g. ``indent``).
            Fraction values are written as floats unless ``default`` is given.

    Returns:
        str: JSON object for a single angle, JSON list for a sequence.

    Raises:
        TypeError: If any item is not an angle.
    """
    kwargs.setdefault("default", _encode_default)
    if isinstance(angles, Angle):
        return json.dumps(angles.to_dict(), **kwargs)
    payload = []
    for angle in angles:
        if not isinstance(angle, Angle):
            msg = f"Expected an angle, got {type(angle).__name__}"
            raise TypeError(msg)
        payload.append(angle.to_dict())
    return json.dumps(payload, **kwargs)


def from_json(text: str, unit_type: type[Angle] = Angle) -> Angle | list[Angle]:
    """Decode JSON produced by ``to_json``.

    Args:
        text: JSON text holding one angle object or a list of them.
        unit_type: Concrete unit to convert every decoded angle into. The
            default keeps each angle in its recorded unit.

    Returns:
        Angle for a JSON object, list of angles for a JSON list.

    Raises:
        ValueError: If the text is not valid JSON or an entry is malformed.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        msg = f"Invalid angle JSON: {e}"
        raise ValueError(msg) from e

    if isinstance(payload, list):
        logger.debug(f"Decoding {len(payload)} angles")
        return [unit_type.from_dict(item) for item in payload]
    return unit_type.from_dict(payload)
