from pagelocators.dom_extractor import parse_html
from pagelocators.locator_generator import (
    class_name_string,
    derive_css_selector,
    derive_xpath,
    extract_locators,
)
from pagelocators.models import LocatorRecord, PageElement


def _rows(html: str) -> list[tuple[str, ...]]:
    return [record.as_row() for record in extract_locators(parse_html(html))]


def test_nested_id_and_name_elements_produce_four_rows() -> None:
    rows = _rows('<div id="a"><span name="n" class="x y"></span></div>')
    assert rows == [
        ("a", "", "div", "", "//div[@id='a']", "div#a", "", ""),
        ("", "", "div", "", "//div[@id='a']", "div#a", "", ""),
        ("", "n", "span", "x y", "//span[@name='n']", "span.x.y", "", ""),
        ("", "", "span", "x y", "//span[@name='n']", "span.x.y", "", ""),
    ]


def test_identical_siblings_share_one_generic_row() -> None:
    rows = _rows("<p></p><p></p>")
    assert rows == [("", "", "p", "", "//p", "p", "", "")]


def test_irregular_class_whitespace_collapses_in_css_selector() -> None:
    element = PageElement(tag="div", class_attr="  a   b ")
    assert derive_css_selector(element) == "div.a.b"
    assert class_name_string(element) == "a   b"


def test_element_with_id_and_name_yields_three_rows() -> None:
    rows = _rows('<input id="user" name="username" class="field">')
    assert rows == [
        ("user", "", "input", "field", "//input[@id='user'][@name='username']", "input#user.field", "", ""),
        ("", "username", "input", "field", "//input[@id='user'][@name='username']", "input#user.field", "", ""),
        ("", "", "input", "field", "//input[@id='user'][@name='username']", "input#user.field", "", ""),
    ]


def test_colliding_xpath_still_emits_id_and_name_rows() -> None:
    rows = _rows('<a id="dup" name="x"></a><a id="dup" name="x" class="other"></a>')
    assert [row[:2] for row in rows] == [("dup", ""), ("", "x"), ("", ""), ("dup", ""), ("", "x")]
    generic = [row for row in rows if row[0] == "" and row[1] == ""]
    assert len(generic) == 1
    assert generic[0][3] == ""


def test_first_element_wins_generic_row_for_shared_xpath() -> None:
    rows = _rows('<ul><li class="first"></li><li class="second"></li></ul><li></li>')
    li_rows = [row for row in rows if row[2] == "li"]
    assert li_rows == [("", "", "li", "first", "//li", "li.first", "", "")]


def test_document_order_is_depth_first() -> None:
    html = "<section><h1></h1><div><em></em></div></section><footer></footer>"
    assert [row[2] for row in _rows(html)] == ["section", "h1", "div", "em", "footer"]


def test_xpath_embeds_quotes_literally() -> None:
    element = PageElement(tag="div", id="it's", attributes={"id": "it's"})
    assert derive_xpath(element) == "//div[@id='it's']"


def test_xpath_ignores_other_attributes() -> None:
    element = PageElement(
        tag="button",
        attributes={"type": "submit", "data-testid": "save", "class": "btn"},
        class_attr="btn",
    )
    assert derive_xpath(element) == "//button"
    assert derive_css_selector(element) == "button.btn"


def test_derivations_are_repeatable() -> None:
    element = PageElement(tag="input", id="q", class_attr="search box", attributes={"name": "query"})
    assert derive_xpath(element) == derive_xpath(element)
    assert derive_css_selector(element) == derive_css_selector(element)
    assert derive_css_selector(element) == "input#q.search.box"


def test_empty_attribute_values_are_treated_as_absent() -> None:
    rows = _rows('<div id="" name="" class=""></div>')
    assert rows == [("", "", "div", "", "//div", "div", "", "")]


def test_extract_accepts_single_element_root() -> None:
    root = PageElement(
        tag="form",
        id="login",
        children=[PageElement(tag="input", attributes={"name": "email"})],
    )
    records = extract_locators(root)
    assert records == [
        LocatorRecord("login", "", "form", "", "//form[@id='login']", "form#login"),
        LocatorRecord("", "", "form", "", "//form[@id='login']", "form#login"),
        LocatorRecord("", "email", "input", "", "//input[@name='email']", "input"),
        LocatorRecord("", "", "input", "", "//input[@name='email']", "input"),
    ]


def test_dedup_state_does_not_leak_between_calls() -> None:
    tree = parse_html("<p></p>")
    assert len(extract_locators(tree)) == 1
    assert len(extract_locators(tree)) == 1


def test_empty_and_text_only_markup_yield_no_rows() -> None:
    assert _rows("") == []
    assert _rows("just some text") == []
