from pathlib import Path
from typing import Optional

from yaml2obj.loader import YamlLoaderWithLineNumber
from yaml2obj.writer import YamlWriter

from memoizer_demo.error_counter import ErrorCounter

SCHEMA_VERSION = "1.0"


class DemoSettings:
    """Knobs of the demonstration run. Every field has a default, so the demo needs no file."""

    def __init__(self):
        self.latency_ms = 300
        self.best_number = 22
        self.text_input = "Hello, World!"
        self.error_counter = ErrorCounter()
        self.source_object: Optional[dict] = None

    @property
    def latency_seconds(self) -> float:
        return self.latency_ms / 1000.0

    @property
    def text_bytes(self) -> bytes:
        return self.text_input.encode("utf-8")

    # fill content from 'data' (read by YamlLoaderWithLineNumber) and record what is wrong.
    # fields with errors keep their default value.
    def fill_and_validate(self, data: dict):
        self.source_object = data
        if not isinstance(data, dict):
            self.error_counter.record("settings must be a mapping")
            return
        line_info = data.get("__line__", {})

        version = data.get("schema-version")
        if version is None:
            self.error_counter.record("object from line %d: key schema-version is not found" %
                                      line_info.get("__begin__", 1))
        elif str(version) != SCHEMA_VERSION:
            self.error_counter.record("@schema-version: %s is not supported, use %s" % (version, SCHEMA_VERSION),
                                      line_info.get("schema-version"))

        latency = self.check_int_field(data, "latency-ms", self.latency_ms)
        if latency is not None:
            self.latency_ms = latency
        best_number = self.check_int_field(data, "best-number", self.best_number)
        if best_number is not None:
            self.best_number = best_number

        text = data.get("text-input")
        if text is not None:
            if isinstance(text, str):
                self.text_input = text
            else:
                self.error_counter.record("@text-input: %r is not a text" % (text, ), line_info.get("text-input"))

        for key in data:
            if key not in KNOWN_KEYS:
                self.error_counter.record("unknown key %s" % key, line_info.get(key))

    # parse optional non-negative integer field. returns None when the value is wrong
    def check_int_field(self, data: dict, key: str, default_value: int) -> Optional[int]:
        value = data.get(key)
        line = data["__line__"].get(key) if "__line__" in data else None
        if value is None:
            return default_value
        if isinstance(value, bool) or not isinstance(value, int):
            self.error_counter.record("@%s: %s is not an integer" % (key, str(value)), line)
            return None
        if value < 0:
            self.error_counter.record("@%s: %d must not be negative" % (key, value), line)
            return None
        return value

    def write_to(self, writer: YamlWriter):
        writer.comment("memoizer demonstration settings")
        writer.comment("every key is optional except schema-version")
        writer.comment(" ")
        writer.name("schema-version").value(SCHEMA_VERSION)
        writer.comment("simulated cost of each computation, in milliseconds")
        writer.name("latency-ms").value(self.latency_ms)
        writer.comment("key looked up in the power-of-two scenario")
        writer.name("best-number").value(self.best_number)
        writer.comment("text converted from bytes in the fallible scenario")
        writer.name("text-input").value(self.text_input)

    def write_as_yaml(self, path: str):
        p = Path(path).resolve()
        p.parents[0].mkdir(parents=True, exist_ok=True)
        with p.open('w', encoding='utf-8') as s:
            self.write_to(YamlWriter(s))

    @classmethod
    def defaults(cls) -> "DemoSettings":
        return DemoSettings()

    @classmethod
    def from_yaml(cls, path: str) -> "DemoSettings":
        settings = DemoSettings()
        settings.fill_and_validate(YamlLoaderWithLineNumber.from_file(path))
        return settings


KNOWN_KEYS = ("schema-version", "latency-ms", "best-number", "text-input", "__line__", "__fullpath__")
