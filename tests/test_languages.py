import pytest

from yatranslate.languages import UNKNOWN, format_direction, parse_direction


def test_format_direction():
    assert format_direction(UNKNOWN, "ru") == "ru"
    assert format_direction("en", "ru") == "en-ru"


def test_parse_direction():
    assert parse_direction("en-ru") == ("en", "ru")


@pytest.mark.parametrize("direction", ["", "en", "en-", "-ru"])
def test_parse_direction_invalid(direction):
    with pytest.raises(ValueError):
        parse_direction(direction)
