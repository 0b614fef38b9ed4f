import io
import os
from typing import Any, Dict

import yaml
from yaml.loader import SafeLoader
from yaml.nodes import MappingNode, ScalarNode


# every mapping read by this loader carries "__line__": {key: line, "__begin__": first line}
# so that settings validation can point at the offending line.
class YamlLoaderWithLineNumber(SafeLoader):

    def compose_node(self, parent, index):
        node = super(YamlLoaderWithLineNumber, self).compose_node(parent, index)
        node.__line__ = node.start_mark.line + 1
        return node

    def construct_mapping(self, node: MappingNode, deep=False) -> Dict[Any, Any]:
        line_info: Dict[Any, int] = {}
        for k, _ in node.value:
            # non-scalar keys are rejected by the base constructor below
            if not isinstance(k, ScalarNode):
                continue
            line_info[k.value] = k.__line__
        line_info["__begin__"] = min(line_info.values(), default=node.__line__)

        mapping = super(YamlLoaderWithLineNumber, self).construct_mapping(node, deep=deep)
        mapping["__line__"] = line_info
        return mapping

    @classmethod
    def from_file(cls, path: str) -> Any:
        with open(path, encoding="utf-8") as file:
            o = yaml.load(file, Loader=cls)
        if o is None:  # empty file
            o = {"__line__": {"__begin__": 1}}
        if isinstance(o, dict):
            o["__fullpath__"] = os.path.abspath(path)
        return o

    @classmethod
    def from_string(cls, body: str) -> Any:
        return yaml.load(io.StringIO(body), Loader=cls)
