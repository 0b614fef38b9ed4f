# write settings to a text stream as YAML, with comments

from typing import TextIO

import yaml


class YamlWriter:
    def __init__(self, stream: TextIO):
        self.stream = stream
        self.level = 0

    def name(self, key: str) -> "YamlWriter":
        self.__indent()
        self.stream.write(key)
        self.stream.write(":")
        return self

    def value(self, value) -> "YamlWriter":
        self.stream.write(" ")
        self.stream.write(self.__scalar(value))
        self.stream.write("\n")
        return self

    def begin_object(self) -> "YamlWriter":
        self.stream.write("\n")
        self.level += 1
        return self

    def end_object(self) -> "YamlWriter":
        if self.level <= 0:
            raise ValueError("level is already 0")
        self.level -= 1
        return self

    def comment(self, body: str) -> "YamlWriter":
        self.__indent()
        self.stream.write("# ")
        self.stream.write(body)
        self.stream.write("\n")
        return self

    # strings which YAML would read back as something else ("1.0", "true", "a: b") are quoted
    @staticmethod
    def __scalar(value) -> str:
        if value is None:
            return "null"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        text = str(value)
        try:
            plain = yaml.safe_load(text) == text and "\n" not in text
        except yaml.YAMLError:
            plain = False
        if plain:
            return text
        dumped = yaml.safe_dump(text, default_style='"', width=float("inf"))
        return dumped.split("\n...")[0].strip()

    def __indent(self) -> "YamlWriter":
        self.stream.write("  " * self.level)
        return self
