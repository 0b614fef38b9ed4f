# the demonstration: each memoizer variant exercised with a fixed sequence of calls.
# output goes through 'printer' and latency through 'sleep' so that tests can replace both.

import time
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from memoizer import Err, GenericMemoizer, KeyedMemoizer, Ok, SingleSlotMemoizer
from memoizer.outcome import Outcome
from memoizer_demo.settings import DemoSettings

Printer = Callable[[str], None]
Sleep = Callable[[float], None]


@dataclass
class CallRecord:
    arg: Any
    result: Any
    computed: bool  # True when this call ran the computation


@dataclass
class ScenarioLog:
    name: str
    calls: List[CallRecord] = field(default_factory=list)
    computations: int = 0

    # count a computation run. called from inside the scenario's computation
    def computed(self) -> None:
        self.computations += 1

    def call(self, memoizer, arg):
        before = self.computations
        result = memoizer.value(arg)
        self.calls.append(CallRecord(arg, result, self.computations > before))
        return result

    def results(self) -> List[Any]:
        return [c.result for c in self.calls]


def single_slot(settings: DemoSettings, printer: Printer = print, sleep: Sleep = time.sleep) -> ScenarioLog:
    log = ScenarioLog("single-slot")

    def calculation(num: int) -> int:
        log.computed()
        printer("Calculating slowly...")
        sleep(settings.latency_seconds)
        return num

    cacher = SingleSlotMemoizer(calculation)
    printer("At this point, cacher has no value in cacher.value.\n"
            "Only when we call cacher.value will the 'expensive' calculation be run")

    log.call(cacher, 5)
    printer("Now the calculation has been run and the value is set. "
            "Further calls to cacher.value will only return the value 'cached', and not rerun the calculation. "
            "the value of cacher.value is %s" % (log.call(cacher, 3), ))

    printer("(should print nothing below)")
    log.call(cacher, 55)

    printer("The problem is that we cannot set the cached value again. "
            "We can fix this by modifying cacher to hold a dict rather than a single value. "
            "the keys of the dict are the arg values that are passed in, "
            "and the values are the result of calling the computation on that key.")
    return log


def keyed(settings: DemoSettings, printer: Printer = print, sleep: Sleep = time.sleep) -> ScenarioLog:
    log = ScenarioLog("keyed")

    def calculation(num: int) -> int:
        log.computed()
        printer("Some super cool long calculation is running... Hopefully only once per key!")
        sleep(settings.latency_seconds)
        return num * 3

    # the computation is only stored here, not run
    cacher_2 = KeyedMemoizer(calculation)
    log.call(cacher_2, 1)
    log.call(cacher_2, 1)  # cached, no calculation

    log.call(cacher_2, 2)
    printer("cacher_2.value(2) is: %s" % (log.call(cacher_2, 2), ))
    printer("cacher_2.value(1) remains: %s" % (log.call(cacher_2, 1), ))
    return log


def is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def power_of_two(settings: DemoSettings, printer: Printer = print, sleep: Sleep = time.sleep) -> ScenarioLog:
    log = ScenarioLog("power-of-two")

    def calculation(arg: int) -> bool:
        log.computed()
        printer("%d is the best number!" % arg)
        return is_power_of_two(arg)

    cacher_3: GenericMemoizer[int, bool] = GenericMemoizer(calculation)
    key = settings.best_number
    log.call(cacher_3, key)
    printer("value stored for key '%d' in cacher_3 is: %s" % (key, log.call(cacher_3, key)))
    return log


# decode bytes as UTF-8. the failure is a value, not an exception
def bytes_to_text(printer: Printer) -> Callable[[bytes], "Outcome[None, str]"]:
    def convert(arg: bytes) -> "Outcome[None, str]":
        printer("Converting arg: %s into str" % (list(arg), ))
        try:
            text = arg.decode("utf-8")
        except UnicodeDecodeError:
            return Err("cannot parse to str")
        printer(text)
        return Ok(None)
    return convert


def bytes_to_text_scenario(settings: DemoSettings, printer: Printer = print,
                           sleep: Sleep = time.sleep, data: Optional[bytes] = None) -> ScenarioLog:
    log = ScenarioLog("bytes-to-text")
    convert = bytes_to_text(printer)

    def calculation(arg: bytes) -> "Outcome[None, str]":
        log.computed()
        return convert(arg)

    cacher_3_num_2: GenericMemoizer[bytes, Outcome] = GenericMemoizer(calculation)
    outcome = log.call(cacher_3_num_2, settings.text_bytes if data is None else data)
    outcome.unwrap_or_else(lambda err: printer("Err is %s" % err))
    return log


SCENARIOS = (single_slot, keyed, power_of_two, bytes_to_text_scenario)


def run_all(settings: DemoSettings, printer: Printer = print, sleep: Sleep = time.sleep) -> List[ScenarioLog]:
    return [scenario(settings, printer, sleep) for scenario in SCENARIOS]
