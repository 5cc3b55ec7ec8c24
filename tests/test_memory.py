import pytest

from barstatus.components import memory
from barstatus.icons import RAM_ICONS, pick_icon
from barstatus.util import fmt_human

SAMPLE = """MemTotal:        1000 kB
MemFree:          200 kB
MemAvailable:     600 kB
Buffers:          100 kB
Cached:           200 kB
SwapCached:       100 kB
Active:           300 kB
SwapTotal:       2000 kB
SwapFree:        1500 kB
"""


@pytest.fixture
def meminfo(tmp_path, monkeypatch):
    path = tmp_path / "meminfo"
    monkeypatch.setattr(memory, "MEMINFO", str(path))
    path.write_text(SAMPLE)
    return path


def test_ram_total(meminfo):
    assert memory.ram_total() == fmt_human(1000 * 1024, 1024)


def test_ram_free(meminfo):
    assert memory.ram_free() == fmt_human(200 * 1024, 1024)


def test_ram_used_excludes_buffers_and_cache(meminfo):
    assert memory.ram_used() == fmt_human(500 * 1024, 1024)


def test_ram_perc(meminfo):
    assert memory.ram_perc() == "50"


def test_ram_perc_di_matches_perc(meminfo):
    assert memory.ram_perc_di() == pick_icon(RAM_ICONS, int(memory.ram_perc()))


def test_ram_zero_total(meminfo):
    meminfo.write_text(SAMPLE.replace("MemTotal:        1000", "MemTotal:        0"))
    assert memory.ram_perc() is None


def test_ram_wrong_layout(meminfo):
    meminfo.write_text("MemFree: 200 kB\nMemTotal: 1000 kB\n")
    assert memory.ram_total() is None


def test_missing_file(tmp_path, monkeypatch):
    monkeypatch.setattr(memory, "MEMINFO", str(tmp_path / "absent"))
    assert memory.ram_free() is None
    assert memory.swap_total() is None


def test_swap_total(meminfo):
    assert memory.swap_total() == fmt_human(2000 * 1024, 1024)


def test_swap_free(meminfo):
    assert memory.swap_free() == fmt_human(1500 * 1024, 1024)


def test_swap_used_excludes_cache(meminfo):
    assert memory.swap_used() == fmt_human(400 * 1024, 1024)


def test_swap_perc(meminfo):
    assert memory.swap_perc() == "20"


def test_swap_perc_without_swap(meminfo):
    meminfo.write_text("SwapCached: 0 kB\nSwapTotal: 0 kB\nSwapFree: 0 kB\n")
    assert memory.swap_perc() is None


def test_swap_missing_field(meminfo):
    meminfo.write_text("SwapTotal: 2000 kB\n")
    assert memory.swap_used() is None
    assert memory.swap_total() == fmt_human(2000 * 1024, 1024)