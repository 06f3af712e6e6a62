import pytest
from app.domain.freight_class import NMFC_CLASSES, freight_class_for, parse_dimensions


# A 12x12x12 inch box is one cubic foot, so weight equals density
@pytest.mark.parametrize("weight, expected", [
    (50, "50"),
    (49.9, "55"),
    (30, "60"),
    (22.5, "65"),
    (15, "70"),
    (10.5, "92.5"),
    (10.49, "100"),
    (1, "400"),
    (0.5, "500"),
])
def test_density_breaks(weight, expected):
    assert freight_class_for(weight, 12, 12, 12) == expected


def test_invalid_input_defaults_to_class_50():
    assert freight_class_for(0, 48, 40, 48) == "50"
    assert freight_class_for(-10, 48, 40, 48) == "50"
    assert freight_class_for(500, 0, 40, 48) == "50"


def test_every_result_is_a_known_class():
    for weight in (1, 5, 50, 500, 5000):
        assert freight_class_for(weight, 48, 40, 48) in NMFC_CLASSES


def test_parse_dimensions():
    assert parse_dimensions("48x40x48") == (48.0, 40.0, 48.0)
    assert parse_dimensions(" 96 X 48 x 60.5 ") == (96.0, 48.0, 60.5)
    assert parse_dimensions("3 Orders Consolidated") is None
    assert parse_dimensions(None) is None
