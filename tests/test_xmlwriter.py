import io
import xml.etree.ElementTree as ET

from tmgsampler.xmlwriter import XmlStream


def _new():
    buf = io.StringIO()
    return buf, XmlStream(buf)


def test_prolog_text():
    buf, xml = _new()
    xml.prolog()
    assert buf.getvalue() == '<?xml version="1.0"?>\n'


def test_prolog_written_once():
    buf, xml = _new()
    xml.prolog().prolog()
    assert buf.getvalue().count("<?xml") == 1


def test_prolog_ignored_inside_tag():
    buf, xml = _new()
    xml.tag("a").prolog()
    assert "<?xml" not in buf.getvalue()


def test_nested_empty_tag_layout():
    buf, xml = _new()
    xml.tag("a").attr("x").write(1).tag("b").endtag("b").endtag("a")
    assert buf.getvalue() == '<a x="1">\n  <b/>\n</a>\n'


def test_attributes_parse_back():
    buf, xml = _new()
    xml.tag("Node").attr("name").write("alpha").attr("count").write(7).endtag("Node")
    root = ET.fromstring(buf.getvalue())
    assert root.tag == "Node"
    assert root.attrib == {"name": "alpha", "count": "7"}


def test_chardata_becomes_text():
    buf, xml = _new()
    xml.tag("H").attr("n").write(2).chardata().write("1 2\n").write("3 4\n").endtag("H")
    root = ET.fromstring(buf.getvalue())
    assert root.attrib["n"] == "2"
    assert root.text.split() == ["1", "2", "3", "4"]


def test_endtag_closes_children():
    buf, xml = _new()
    xml.tag("a").tag("b").tag("c").endtag("a")
    root = ET.fromstring(buf.getvalue())
    assert root.tag == "a"
    assert [child.tag for child in root] == ["b"]
    assert [child.tag for child in root[0]] == ["c"]


def test_empty_endtag_closes_one():
    buf, xml = _new()
    xml.tag("a").tag("b").endtag("").tag("c").endtag("a")
    root = ET.fromstring(buf.getvalue())
    assert [child.tag for child in root] == ["b", "c"]


def test_close_finishes_document():
    buf, xml = _new()
    xml.prolog().tag("root").tag("inner").attr("k").write("v")
    xml.close()
    root = ET.fromstring(buf.getvalue())
    assert root.tag == "root"
    assert root[0].attrib == {"k": "v"}


def test_context_manager_closes_tags():
    buf = io.StringIO()
    with XmlStream(buf) as xml:
        xml.tag("outer").tag("inner")
    root = ET.fromstring(buf.getvalue())
    assert [child.tag for child in root] == ["inner"]
    assert not buf.closed


def test_attr_outside_tag_is_ignored():
    buf, xml = _new()
    xml.attr("x")
    assert buf.getvalue() == ""


def test_float_uses_six_significant_digits():
    buf, xml = _new()
    xml.tag("v").attr("x").write(1.0 / 3.0).endtag("v")
    root = ET.fromstring(buf.getvalue())
    assert root.attrib["x"] == format(1.0 / 3.0, "g")
    assert len(root.attrib["x"].replace("0.", "")) == 6


def test_chaining_returns_same_stream():
    _, xml = _new()
    assert xml.tag("a") is xml
    assert xml.attr("b").write(3) is xml