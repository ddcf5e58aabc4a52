"""Typed access to material properties.

MATL chunks store every property value as a string, and the decoder keeps
them that way. A consumer that wants numbers calls coerce_properties, which
looks each key up in COERCIONS:

    (_type : str)   _diffuse, _metal, _glass, _emit, _plastic, ...
    (_weight, _rough, _spec, _ior, _att, _flux : float)
    (_plastic : bool)

Keys not in the table stay strings.
"""

import logging
from typing import NamedTuple, Union

from voxcubes.model import Material

logger = logging.getLogger(__name__)

STR = "str"
FLOAT = "float"
BOOL = "bool"

COERCIONS: dict[str, str] = {
    "_type": STR,
    "_weight": FLOAT,
    "_rough": FLOAT,
    "_spec": FLOAT,
    "_ior": FLOAT,
    "_att": FLOAT,
    "_flux": FLOAT,
    "_plastic": BOOL,
}


class PropertyValue(NamedTuple):
    """A material property value tagged with its kind."""

    kind: str
    value: Union[str, float, bool]


def coerce_value(key: str, raw: str) -> PropertyValue:
    """Interpret one raw property string according to COERCIONS.

    A value that does not parse as its table kind is kept as a string.
    """
    kind = COERCIONS.get(key, STR)

    if kind == FLOAT:
        try:
            return PropertyValue(FLOAT, float(raw))
        except ValueError:
            logger.warning(f"Material property {key}={raw!r} is not a number")
            return PropertyValue(STR, raw)

    if kind == BOOL:
        # MagicaVoxel writes flags as "0"/"1"; a bare key means set.
        return PropertyValue(BOOL, raw.strip() not in ("0", "false", "False"))

    return PropertyValue(STR, raw)


def coerce_properties(material: Material) -> dict[str, PropertyValue]:
    """Typed view of a material's properties. The material is not modified."""
    return {key: coerce_value(key, raw) for key, raw in material.properties.items()}
