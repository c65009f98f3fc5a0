import json

from lxml import etree

from xsdmerge.__main__ import main

XS = "http://www.w3.org/2001/XMLSchema"

PEOPLE = f"""<?xml version="1.0"?>
<xs:schema xmlns:xs="{XS}">
  <xs:element name="Person">
    <xs:complexType>
      <xs:attribute name="age" type="xs:decimal"/>
    </xs:complexType>
  </xs:element>
</xs:schema>
"""

MORE_PEOPLE = f"""<?xml version="1.0"?>
<xs:schema xmlns:xs="{XS}">
  <xs:element name="person">
    <xs:complexType>
      <xs:attribute name="tag" type="xs:string"/>
      <xs:attribute name="photo" type="xs:hexBinary"/>
    </xs:complexType>
  </xs:element>
</xs:schema>
"""


def schemas(tmp_path):
    d = tmp_path / "schemas"
    d.mkdir()
    (d / "1.xsd").write_text(PEOPLE)
    (d / "2.xsd").write_text(MORE_PEOPLE)
    return d


def test_merge(tmp_path):
    out = tmp_path / "merged.xsd"
    assert main(["merge", str(schemas(tmp_path)), "-o", str(out)]) == 0

    root = etree.parse(str(out)).getroot()
    assert [e.get("name") for e in root] == ["Person", "person"]


def test_merge_case_insensitive(tmp_path):
    out = tmp_path / "merged.xsd"
    assert main(["merge", "-c", str(schemas(tmp_path)), "-o", str(out)]) == 0

    root = etree.parse(str(out)).getroot()
    assert [e.get("name") for e in root] == ["Person"]
    attrs = root.findall(f".//{{{XS}}}attribute")
    assert [a.get("name") for a in attrs] == ["age", "tag", "photo"]


def test_generate_stdout(tmp_path, capsys):
    assert main(["generate", "--case-insensitive", str(schemas(tmp_path))]) == 0

    assert capsys.readouterr().out == (
        "struct Person {\n"
        "\tdouble age;\n"
        "\tstd::string tag;\n"
        "\t(invalid type) photo;\n"
        "};\n"
    )


def test_generate_file_with_types(tmp_path):
    types = tmp_path / "types.json"
    types.write_text(json.dumps({"xs:hexBinary": "std::vector<unsigned char>"}))
    out = tmp_path / "model.hpp"

    assert main(["generate", str(schemas(tmp_path) / "2.xsd"), "-t", str(types), "-o", str(out)]) == 0
    assert out.read_text() == (
        "struct person {\n"
        "\tstd::string tag;\n"
        "\tstd::vector<unsigned char> photo;\n"
        "};\n"
    )


def test_unmapped_type_warning(tmp_path, caplog):
    assert main(["generate", str(schemas(tmp_path))]) == 0
    assert any("xs:hexBinary" in r.getMessage() for r in caplog.records)
    assert "1 fields use 1 unmapped types: xs:hexBinary" in caplog.text


def test_missing_input(tmp_path):
    assert main(["merge", str(tmp_path / "missing"), "-o", str(tmp_path / "out.xsd")]) == 1


def test_malformed_input(tmp_path):
    d = schemas(tmp_path)
    (d / "3.xsd").write_text("<xs:schema><oops></xs:schema>")
    out = tmp_path / "out.xsd"

    assert main(["merge", str(d), "-o", str(out)]) == 1
    assert not out.exists()


def test_bad_types_file(tmp_path):
    types = tmp_path / "types.json"
    types.write_text("[]")
    assert main(["generate", str(schemas(tmp_path)), "-t", str(types)]) == 1
