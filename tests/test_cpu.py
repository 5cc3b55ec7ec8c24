import pytest

from barstatus.components import cpu
from barstatus.icons import CPU_ICONS, pick_icon
from barstatus.util import fmt_human


@pytest.fixture
def stat(tmp_path, monkeypatch):
    path = tmp_path / "stat"
    monkeypatch.setattr(cpu, "PROC_STAT", str(path))
    monkeypatch.setattr(cpu, "_usage", cpu._CpuUsage())

    def write(*values):
        path.write_text("cpu  " + " ".join(str(v) for v in values) + " 0 0 0\ncpu0 1 2 3\n")

    return write


def test_freq_scales_khz(tmp_path, monkeypatch):
    path = tmp_path / "freq"
    path.write_text("2400000\n")
    monkeypatch.setattr(cpu, "CPU_FREQ", str(path))
    assert cpu.cpu_freq() == fmt_human(2400000 * 1000, 1000)


def test_freq_missing(tmp_path, monkeypatch):
    monkeypatch.setattr(cpu, "CPU_FREQ", str(tmp_path / "none"))
    assert cpu.cpu_freq() is None


def test_first_sample_has_no_value(stat):
    stat(100, 0, 100, 800, 0, 0, 0)
    assert cpu.cpu_perc() is None


def test_usage_between_samples(stat):
    stat(100, 0, 100, 800, 0, 0, 0)
    cpu.cpu_perc()
    stat(200, 0, 200, 1600, 0, 0, 0)
    assert cpu.cpu_perc() == "20"


def test_idle_only_is_zero(stat):
    stat(100, 0, 100, 800, 0, 0, 0)
    cpu.cpu_perc()
    stat(100, 0, 100, 900, 0, 0, 0)
    assert cpu.cpu_perc() == "0"


def test_pair_of_calls_share_a_sample(stat):
    stat(100, 0, 100, 800, 0, 0, 0)
    cpu.cpu_perc()
    stat(200, 0, 200, 1600, 0, 0, 0)
    first = cpu.cpu_perc()
    stat(1200, 0, 200, 1600, 0, 0, 0)
    assert cpu.cpu_perc_di() == pick_icon(CPU_ICONS, int(first))


def test_third_call_samples_again(stat):
    stat(100, 0, 100, 800, 0, 0, 0)
    cpu.cpu_perc()
    stat(200, 0, 200, 1600, 0, 0, 0)
    cpu.cpu_perc()
    cpu.cpu_perc()
    stat(300, 0, 200, 1600, 0, 0, 0)
    assert cpu.cpu_perc() == "100"


def test_no_change_gives_none(stat):
    stat(100, 0, 100, 800, 0, 0, 0)
    cpu.cpu_perc()
    assert cpu.cpu_perc() is None


def test_malformed_stat(stat, tmp_path):
    (tmp_path / "stat").write_text("cpu 1 2\n")
    assert cpu.cpu_perc() is None