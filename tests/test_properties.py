import logging

from voxcubes.model import Material
from voxcubes.properties import (
    BOOL,
    FLOAT,
    STR,
    PropertyValue,
    coerce_properties,
    coerce_value,
)


def test_coerce_numeric_keys():
    material = Material(
        1,
        {
            "_type": "_glass",
            "_weight": "1",
            "_rough": "0.4",
            "_spec": "0.5",
            "_ior": "0.3",
            "_att": "0.2",
            "_flux": "3",
        },
    )

    typed = coerce_properties(material)

    assert typed["_type"] == PropertyValue(STR, "_glass")
    assert typed["_rough"] == PropertyValue(FLOAT, 0.4)
    assert typed["_flux"] == PropertyValue(FLOAT, 3.0)
    assert {value.kind for key, value in typed.items() if key != "_type"} == {FLOAT}
    assert material.properties["_rough"] == "0.4"


def test_unknown_keys_stay_strings():
    assert coerce_value("_d", "0.05") == PropertyValue(STR, "0.05")


def test_plastic_flag():
    assert coerce_value("_plastic", "1") == PropertyValue(BOOL, True)
    assert coerce_value("_plastic", "0") == PropertyValue(BOOL, False)
    assert coerce_value("_plastic", "") == PropertyValue(BOOL, True)


def test_unparseable_number(caplog):
    with caplog.at_level(logging.WARNING):
        value = coerce_value("_rough", "rough")

    assert value == PropertyValue(STR, "rough")
    assert "_rough" in caplog.text
