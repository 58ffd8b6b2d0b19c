import pytest

from htmlisp import Document, Element, Text, parse, render_compact, render_pretty

GREETING = '(div (class "greeting") "Hello, " (b "world") "!")'


def _nested(depth: int) -> Document:
    node = Element(f"h{depth}", (), (Text("leaf"),))
    for level in range(depth - 1, 0, -1):
        node = Element(f"h{level}", (), (node,))
    return Document((node,))


def test_compact_greeting() -> None:
    assert render_compact(parse(GREETING)) == '<div class="greeting">Hello, <b>world</b>!</div>'


def test_compact_keeps_attribute_and_sibling_order() -> None:
    document = parse('(a href "/x" title "t" class "c" "one" (i "two") "three") (hr)')
    assert render_compact(document) == (
        '<a href="/x" title="t" class="c">one<i>two</i>three</a><hr></hr>'
    )


def test_compact_escapes_text() -> None:
    document = Document((Element("p", (), (Text("1 < 2 & 3 > 0"),)),))
    assert render_compact(document) == "<p>1 &lt; 2 &amp; 3 &gt; 0</p>"


def test_text_quotes_are_left_alone() -> None:
    document = Document((Text("it's \"fine\""),))
    assert render_compact(document) == "it's \"fine\""


def test_attribute_values_escape_quotes() -> None:
    document = Document((Element("img", (("alt", 'say "hi" <x> & y'),)),))
    assert render_compact(document) == '<img alt="say &quot;hi&quot; &lt;x&gt; &amp; y"></img>'


@pytest.mark.parametrize(
    "text",
    ["<script>", "a & b", "x > y", "<<&&>>", "plain"],
)
def test_rendered_text_never_contains_raw_specials(text: str) -> None:
    document = Document((Element("p", (("title", f'"{text}"'),), (Text(text),)),))
    for rendered in (render_compact(document), render_pretty(document)):
        inner = rendered.strip()
        inner = inner[inner.index(">") + 1 : inner.rindex("</p>")]
        assert "<" not in inner and ">" not in inner
        assert "&" not in inner.replace("&lt;", "").replace("&gt;", "").replace("&amp;", "")
        opening = rendered[: rendered.index(">")]
        assert opening.count('"') == 2


def test_pretty_greeting() -> None:
    assert render_pretty(parse(GREETING)) == (
        '<div class="greeting">\n'
        "  Hello, \n"
        "  <b>world</b>\n"
        "  !\n"
        "</div>\n"
    )


def test_pretty_start_depth_and_indent() -> None:
    document = parse('(ul id "menu" "x" (li "a") (li "b"))')
    assert render_pretty(document, 1, "    ") == (
        '    <ul id="menu">\n'
        "        x\n"
        "        <li>a</li>\n"
        "        <li>b</li>\n"
        "    </ul>\n"
    )


def test_pretty_keeps_text_only_elements_on_one_line() -> None:
    document = parse('(p "a" "b") (br)')
    assert render_pretty(document) == "<p>ab</p>\n<br></br>\n"


def test_pretty_nesting_depth_indentation() -> None:
    lines = render_pretty(_nested(5)).splitlines()
    depth_of = {}
    for line in lines:
        stripped = line.lstrip(" ")
        indent = len(line) - len(stripped)
        if stripped.startswith("</"):
            tag = stripped[2:-1]
            assert indent == depth_of[tag], f"closing {tag} misaligned"
        else:
            tag = stripped[1 : stripped.index(">")]
            depth_of[tag] = indent
    for level in range(2, 6):
        assert depth_of[f"h{level}"] > depth_of[f"h{level - 1}"]


def test_pretty_empty_document() -> None:
    assert render_pretty(Document(())) == ""
    assert render_compact(Document(())) == ""


def test_render_single_node() -> None:
    node = Element("em", (), (Text("x"),))
    assert render_compact(node) == "<em>x</em>"
    assert render_pretty(node, 2) == "    <em>x</em>\n"


def test_pretty_rejects_negative_depth() -> None:
    with pytest.raises(ValueError):
        render_pretty(Document(()), -1)


def test_unknown_node_type_is_rejected() -> None:
    with pytest.raises(TypeError):
        render_compact([object()])  # type: ignore[list-item]


def test_invalid_tag_names_are_rejected() -> None:
    for tag in ("", "a b", "a(b", 'x"'):
        with pytest.raises(ValueError):
            Element(tag)


def test_deeply_nested_documents_render() -> None:
    depth = 3000
    document = parse('(a "t" ' * depth + ")" * depth)

    assert render_compact(document) == "<a>t" * depth + "</a>" * depth

    lines = render_pretty(document, indent=" ").splitlines()
    assert len(lines) == 3 * depth - 2
    assert lines[0] == "<a>"
    assert lines[-1] == "</a>"
    assert lines[2 * (depth - 1)] == " " * (depth - 1) + "<a>t</a>"
