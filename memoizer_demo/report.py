# the scenario logs as an XML document

from pathlib import Path
from typing import List

from lxml import etree  # type: ignore
from lxml.builder import E  # type: ignore

from memoizer_demo.scenarios import ScenarioLog


def build_report(logs: List[ScenarioLog]) -> etree._Element:
    scenarios = []
    for log in logs:
        calls = [E.call(arg=repr(c.arg), result=repr(c.result), computed="true" if c.computed else "false")
                 for c in log.calls]
        scenarios.append(E.scenario(*calls, name=log.name, computations=str(log.computations)))
    return E("memoizer-demo", *scenarios)


def write_report(logs: List[ScenarioLog], path: str) -> None:
    p = Path(path).resolve()
    p.parents[0].mkdir(parents=True, exist_ok=True)
    p.write_text(etree.tostring(build_report(logs), encoding="unicode", pretty_print=True))
