from barstatus.components import temperature
from barstatus.icons import TEMP_ICONS


def _sensor(tmp_path, text):
    path = tmp_path / "temp"
    path.write_text(text)
    return str(path)


def test_temp_converts_millidegrees(tmp_path):
    assert temperature.temp(_sensor(tmp_path, "45000\n")) == "45"


def test_temp_truncates_fraction(tmp_path):
    assert temperature.temp(_sensor(tmp_path, "45999\n")) == "45"


def test_temp_missing_file_is_none(tmp_path):
    assert temperature.temp(str(tmp_path / "missing")) is None


def test_temp_unparsable_is_none(tmp_path):
    assert temperature.temp(_sensor(tmp_path, "hot\n")) is None


def test_temp_di_low_value_uses_first_icon(tmp_path):
    result = temperature.temp_di(_sensor(tmp_path, "40000\n"))
    assert result == TEMP_ICONS[0].render()


def test_temp_di_at_level_boundary(tmp_path):
    level = TEMP_ICONS[1].level
    result = temperature.temp_di(_sensor(tmp_path, f"{level * 1000}\n"))
    assert result == TEMP_ICONS[1].render()


def test_temp_di_above_all_levels_is_bare_first_icon(tmp_path):
    above = TEMP_ICONS[-1].level + 10
    result = temperature.temp_di(_sensor(tmp_path, f"{above * 1000}\n"))
    assert result == TEMP_ICONS[0].icon


def test_temp_di_missing_file_is_none(tmp_path):
    assert temperature.temp_di(str(tmp_path / "missing")) is None