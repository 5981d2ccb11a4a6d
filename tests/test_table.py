import io
import sys
import time

import pytest

from philosophers.parsing import Settings
from philosophers.table import Fork, Philosopher, Table


def _settings(count):
    return Settings(
        count=count, time_to_die=800_000, time_to_eat=200_000, time_to_sleep=200_000
    )


@pytest.mark.parametrize("count", [1, 2, 5])
def test_forks_numbered_from_one(count):
    table = Table(_settings(count), io.StringIO())
    assert [fork.number for fork in table.forks] == list(range(1, count + 1))
    assert [p.index for p in table.philosophers] == list(range(1, count + 1))


def test_seating_is_circular():
    table = Table(_settings(4), io.StringIO())
    for position, philosopher in enumerate(table.philosophers):
        assert philosopher.left_fork is table.forks[position]
        assert philosopher.right_fork is table.forks[(position + 1) % 4]
    assert table.philosophers[-1].right_fork is table.forks[0]


def test_min_and_max_fork():
    table = Table(_settings(3), io.StringIO())
    last = table.philosophers[-1]
    assert last.min_fork() is table.forks[0]
    assert last.max_fork() is table.forks[2]
    first = table.philosophers[0]
    assert first.min_fork() is table.forks[0]
    assert first.max_fork() is table.forks[1]


def test_single_philosopher_shares_one_fork():
    table = Table(_settings(1), io.StringIO())
    only = table.philosophers[0]
    assert only.left_fork is only.right_fork
    assert only.min_fork() is only.max_fork()


def test_last_users():
    table = Table(_settings(3), io.StringIO())
    philosopher = table.philosophers[1]
    assert philosopher.min_fork_last_user() == 0
    assert philosopher.max_fork_last_user() == 0
    philosopher.min_fork().last_user = 2
    philosopher.max_fork().last_user = 3
    assert philosopher.min_fork_last_user() == 2
    assert philosopher.max_fork_last_user() == 3


def test_initial_state():
    table = Table(_settings(2), io.StringIO())
    for philosopher in table.philosophers:
        assert philosopher.turns == 0
        assert philosopher.is_eating is False
        assert philosopher.last_meal_us == table.start_us


def test_end_flag():
    table = Table(_settings(2), io.StringIO())
    assert table.someone_is_dead() is False
    table.end()
    assert table.someone_is_dead() is True


def test_elapsed_ms_grows():
    table = Table(_settings(2), io.StringIO())
    first = table.elapsed_ms()
    time.sleep(0.02)
    second = table.elapsed_ms()
    assert first >= 0
    assert second - first >= 15


def test_default_stream_is_stdout():
    table = Table(_settings(2))
    assert table.stream is sys.stdout


def test_philosopher_describe():
    left, right = Fork(1), Fork(2)
    philosopher = Philosopher(index=1, left_fork=left, right_fork=right, last_meal_us=5_000_000)
    assert philosopher.describe() == (
        "Philo index 1; last_eating_time 5; Left fork 1; Right fork 2; must die 0.\n"
    )


def test_table_describe_has_a_line_per_philosopher():
    table = Table(_settings(3), io.StringIO())
    lines = table.describe().splitlines()
    assert len(lines) == 3
    assert lines[2].startswith("Philo index 3; ")
    assert "Left fork 3; Right fork 1;" in lines[2]