from datetime import date

import pytest

from src.resourceflow.resourceflow.common.datetime_utils import add_months, month_bounds, require_date
from src.resourceflow.resourceflow.common.validators import require_hex_color, require_number, sanitize_text
from src.resourceflow.resourceflow.core.exceptions import ValidationError


def test_sanitize_strips_tags_and_control_characters():
    assert sanitize_text("<script>x</script>Team\x07 A ") == "xTeam A"


def test_sanitize_caps_length():
    assert sanitize_text("a" * 50, max_length=10) == "a" * 10


def test_require_number_bounds():
    assert require_number("7.5", "Hours", min_value=0, max_value=24) == 7.5
    with pytest.raises(ValidationError):
        require_number(-1, "Hours", min_value=0)
    with pytest.raises(ValidationError):
        require_number(True, "Hours")
    with pytest.raises(ValidationError):
        require_number("abc", "Hours")


def test_hex_color():
    assert require_hex_color("#10b981", "Color") == "#10b981"
    with pytest.raises(ValidationError):
        require_hex_color("green", "Color")


def test_require_date_rejects_bad_format():
    assert require_date("2026-02-28", "Date") == date(2026, 2, 28)
    with pytest.raises(ValidationError):
        require_date("28/02/2026", "Date")


def test_month_helpers():
    assert month_bounds(date(2028, 2, 1)) == (date(2028, 2, 1), date(2028, 2, 29))
    assert add_months(date(2026, 12, 1), 1) == date(2027, 1, 1)
    assert add_months(date(2026, 1, 1), -1) == date(2025, 12, 1)
