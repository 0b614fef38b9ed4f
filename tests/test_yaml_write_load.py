import io

import pytest
from yaml.constructor import ConstructorError

from yaml2obj.loader import YamlLoaderWithLineNumber
from yaml2obj.writer import YamlWriter

# Write YAML and read it with line numbers


def test_yaml_read_write():
    b = make_sample_yaml()
    v = YamlLoaderWithLineNumber.from_string(b)
    line_info = v["__line__"]
    assert v["key0"] == "value0"
    assert v["key1"]["key11"] == "value11"
    assert line_info["key0"] == 2
    assert line_info["key1"] == 3
    assert line_info["__begin__"] == 2
    assert v["key1"]["__line__"]["key11"] == 4


def test_ambiguous_strings_are_quoted():
    s = io.StringIO()
    writer = YamlWriter(s)
    writer.name("version").value("1.0")
    writer.name("flag").value("true")
    writer.name("pair").value("a: b")
    writer.name("empty").value("")
    writer.name("number").value(1)
    v = YamlLoaderWithLineNumber.from_string(s.getvalue())
    assert v["version"] == "1.0"
    assert v["flag"] == "true"
    assert v["pair"] == "a: b"
    assert v["empty"] == ""
    assert v["number"] == 1


def test_sequence_key_is_a_yaml_error():
    with pytest.raises(ConstructorError, match="unhashable key"):
        YamlLoaderWithLineNumber.from_string('key0: value0\n? [1, 2]\n: x\n')


def test_file_is_read_as_utf8(tmp_path):
    path = tmp_path / "utf8.yml"
    path.write_bytes("text: héllo\n".encode("utf-8"))
    v = YamlLoaderWithLineNumber.from_file(str(path))
    assert v["text"] == "héllo"
    assert v["__line__"]["text"] == 1


# expected yaml
# # sample
# key0: value0
# key1:
#   key11: value11

def make_sample_yaml() -> str:
    s = io.StringIO()
    writer = YamlWriter(s)
    writer.comment("sample")
    writer.name("key0").value("value0")
    writer.name("key1").begin_object()
    writer.name("key11").value("value11")
    writer.end_object()
    return s.getvalue()
