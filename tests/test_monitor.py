import io
import time

from philosophers.monitor import everyone_ate, monitor, monitor_endlessly, monitor_turns
from philosophers.parsing import Settings
from philosophers.table import Table


def make_table(count=3, die=10_000_000, turns=1):
    settings = Settings(
        count=count,
        time_to_die=die,
        time_to_eat=1000,
        time_to_sleep=1000,
        turns_to_eat=turns,
    )
    return Table(settings, io.StringIO())


def test_everyone_ate_requires_exact_turns():
    table = make_table(turns=1)
    assert everyone_ate(table) is False
    for philosopher in table.philosophers:
        philosopher.turns = 1
    assert everyone_ate(table) is True
    table.philosophers[-1].turns = 2
    assert everyone_ate(table) is False


def test_monitor_turns_returns_when_all_ate():
    table = make_table(turns=1)
    for philosopher in table.philosophers:
        philosopher.turns = 1
    assert monitor_turns(table) is False
    assert table.someone_is_dead() is False
    assert table.stream.getvalue() == ""


def test_monitor_turns_detects_starvation():
    table = make_table(die=1000, turns=2)
    time.sleep(0.01)
    assert monitor_turns(table) is True
    assert table.someone_is_dead() is True
    lines = table.stream.getvalue().splitlines(keepends=True)
    assert len(lines) == 1
    assert lines[0].endswith(" 1 died\n")


def test_monitor_endlessly_detects_starvation():
    table = make_table(die=20_000, turns=0)
    started = time.monotonic()
    assert monitor_endlessly(table) is True
    assert time.monotonic() - started >= 0.015
    assert table.stream.getvalue().endswith("died\n")


def test_monitor_dispatches_on_turns():
    unlimited = make_table(die=1000, turns=0)
    time.sleep(0.01)
    assert monitor(unlimited) is True

    limited = make_table(turns=1)
    for philosopher in limited.philosophers:
        philosopher.turns = 1
    assert monitor(limited) is False