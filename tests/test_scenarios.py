from typing import List

from memoizer import Err, Ok
from memoizer_demo.scenarios import (bytes_to_text_scenario, is_power_of_two, keyed, power_of_two, run_all,
                                     single_slot)
from memoizer_demo.settings import DemoSettings


class Console:
    """collects what a scenario prints and how long it sleeps"""

    def __init__(self):
        self.lines: List[str] = []
        self.sleeps: List[float] = []

    def print(self, text: str):
        self.lines.append(text)

    def sleep(self, seconds: float):
        self.sleeps.append(seconds)


def test_single_slot():
    c = Console()
    log = single_slot(DemoSettings.defaults(), c.print, c.sleep)
    assert log.results() == [5, 5, 5]
    assert [call.computed for call in log.calls] == [True, False, False]
    assert log.computations == 1
    assert c.lines.count("Calculating slowly...") == 1
    assert c.sleeps == [0.3]
    # nothing is calculated after the marker
    marker = c.lines.index("(should print nothing below)")
    assert "Calculating slowly..." not in c.lines[marker:]
    assert any(line.endswith("the value of cacher.value is 5") for line in c.lines)


def test_keyed():
    c = Console()
    log = keyed(DemoSettings.defaults(), c.print, c.sleep)
    assert log.results() == [3, 3, 6, 6, 3]
    assert log.computations == 2
    assert c.lines[-2:] == ["cacher_2.value(2) is: 6", "cacher_2.value(1) remains: 3"]
    assert len(c.sleeps) == 2


def test_power_of_two():
    c = Console()
    log = power_of_two(DemoSettings.defaults(), c.print, c.sleep)
    assert log.results() == [False, False]
    assert log.computations == 1
    assert c.lines == ["22 is the best number!", "value stored for key '22' in cacher_3 is: False"]

    settings = DemoSettings.defaults()
    settings.best_number = 16
    assert power_of_two(settings, c.print, c.sleep).results() == [True, True]


def test_is_power_of_two():
    assert [n for n in range(20) if is_power_of_two(n)] == [1, 2, 4, 8, 16]


def test_bytes_to_text():
    c = Console()
    log = bytes_to_text_scenario(DemoSettings.defaults(), c.print, c.sleep)
    assert log.results() == [Ok(None)]
    assert c.lines[0] == "Converting arg: %s into str" % (list(b"Hello, World!"), )
    assert c.lines[1] == "Hello, World!"


def test_bytes_to_text_failure_is_reported():
    c = Console()
    log = bytes_to_text_scenario(DemoSettings.defaults(), c.print, c.sleep, data=b"\xff\xfe")
    assert log.results() == [Err("cannot parse to str")]
    assert c.lines[-1] == "Err is cannot parse to str"


def test_run_all():
    c = Console()
    settings = DemoSettings.defaults()
    settings.latency_ms = 0
    logs = run_all(settings, c.print, c.sleep)
    assert [log.name for log in logs] == ["single-slot", "keyed", "power-of-two", "bytes-to-text"]
    assert [log.computations for log in logs] == [1, 2, 1, 1]
    assert set(c.sleeps) == {0.0}
