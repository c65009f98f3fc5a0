import json

import pytest

from xsdmerge.model import CasePolicy
from xsdmerge.utils import collect_inputs, load_type_overrides, merge_files

XS = 'xmlns:xs="http://www.w3.org/2001/XMLSchema"'


def write(path, body):
    path.write_text(f'<?xml version="1.0"?>\n<xs:schema {XS}>{body}</xs:schema>\n')
    return path


def test_collect_inputs_dir(tmp_path):
    write(tmp_path / "b.xsd", "")
    write(tmp_path / "a.xsd", "")
    (tmp_path / "notes.txt").write_text("not a schema")
    (tmp_path / "upper.XSD").write_text("")
    (tmp_path / "sub.xsd").mkdir()

    assert collect_inputs(tmp_path) == [tmp_path / "a.xsd", tmp_path / "b.xsd"]


def test_collect_inputs_file(tmp_path):
    f = write(tmp_path / "one.xsd", "")
    assert collect_inputs(f) == [f]

    other = tmp_path / "one.xml"
    other.write_text("<a/>")
    with pytest.raises(ValueError):
        collect_inputs(other)
    assert collect_inputs(other, extension=".xml") == [other]


def test_collect_inputs_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        collect_inputs(tmp_path / "missing")


def test_collect_inputs_empty_dir(tmp_path):
    assert collect_inputs(tmp_path) == []


def test_load_type_overrides(tmp_path):
    f = tmp_path / "types.json"
    f.write_text(json.dumps({"xs:string": "QString", "xs:boolean": "bool"}))
    assert load_type_overrides(f) == {"xs:string": "QString", "xs:boolean": "bool"}


@pytest.mark.parametrize("content", [
    '["xs:string"]',
    '{"xs:string": 1}',
    '{"xs:string": ',
])
def test_load_type_overrides_invalid(tmp_path, content):
    f = tmp_path / "types.json"
    f.write_text(content)
    with pytest.raises(ValueError):
        load_type_overrides(f)


def test_merge_files(tmp_path):
    a = write(tmp_path / "a.xsd", '<xs:element name="A"/><xs:element name="Shared"/>')
    b = write(tmp_path / "b.xsd", '<xs:element name="shared"/><xs:element name="B"/>')

    merged = merge_files([a, b])
    names = [c.get_attr("name") for c in merged.children[0].children]
    assert names == ["A", "Shared", "shared", "B"]

    merged = merge_files([a, b], CasePolicy(True))
    names = [c.get_attr("name") for c in merged.children[0].children]
    assert names == ["A", "Shared", "B"]


def test_merge_files_empty():
    merged = merge_files([])
    assert merged.children == []
