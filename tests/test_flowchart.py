import xml.etree.ElementTree as ET

from codevoyage.services.flowchart_service import build_flowchart_svg, content_disposition, flowchart_filename
from codevoyage.services.roadmap_service import generate_milestones

SVG_NS = "{http://www.w3.org/2000/svg}"


def _roadmap(titles):
    return {"title": "T", "overview": "O", "milestones": [{"title": t} for t in titles]}


def test_small_roadmap_uses_minimum_height():
    root = ET.fromstring(build_flowchart_svg(_roadmap(["A", "B"])))
    assert root.get("width") == "800"
    assert root.get("height") == "400"


def test_height_grows_with_milestones():
    root = ET.fromstring(build_flowchart_svg(_roadmap([str(i) for i in range(6)])))
    assert root.get("height") == "720"


def test_node_layout():
    root = ET.fromstring(build_flowchart_svg(_roadmap(["First", "Second", "Third"])))
    labels = [t.text for t in root.iter(f"{SVG_NS}text")]
    assert labels == ["Start", "First", "Second", "Third", "Mastery!"]

    rects = list(root.iter(f"{SVG_NS}rect"))
    assert [r.get("y") for r in rects] == ["20", "100", "200", "300", "450"]

    lines = list(root.iter(f"{SVG_NS}line"))
    assert (lines[0].get("y1"), lines[0].get("y2")) == ("70", "90")
    assert (lines[1].get("y1"), lines[1].get("y2")) == ("170", "190")
    assert (lines[-1].get("y1"), lines[-1].get("y2")) == ("410", "440")


def test_titles_are_escaped():
    svg = build_flowchart_svg(_roadmap(["C# & <Friends>"]))
    assert "C# &amp; &lt;Friends&gt;" in svg
    ET.fromstring(svg)


def test_accepts_generated_milestones():
    svg = build_flowchart_svg({"milestones": generate_milestones("JavaScript", 1)})
    assert "Project: Interactive Web Application" in svg


def test_flowchart_filename():
    assert flowchart_filename("Vue.js") == "vue.js-learning-roadmap.svg"
    assert flowchart_filename("Machine  Learning") == "machine-learning-learning-roadmap.svg"


def test_content_disposition_plain_ascii():
    assert content_disposition("Vue.js") == 'attachment; filename="vue.js-learning-roadmap.svg"'


def test_content_disposition_is_latin1_safe():
    header = content_disposition("日本語")
    header.encode("latin-1")
    assert header == (
        'attachment; filename="learning-roadmap.svg"; '
        "filename*=utf-8''%E6%97%A5%E6%9C%AC%E8%AA%9E-learning-roadmap.svg"
    )


def test_content_disposition_drops_quotes_from_fallback():
    header = content_disposition('a"b')
    assert header == (
        'attachment; filename="ab-learning-roadmap.svg"; '
        "filename*=utf-8''a%22b-learning-roadmap.svg"
    )
