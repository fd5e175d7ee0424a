from pagecraft.markup import attribute, boolean_attribute, build_attributes, render_tag


def test_attributes_follow_fixed_order() -> None:
    attributes = build_attributes(
        id="main",
        classes=["p-4", "bg-white"],
        role="navigation",
        label="Primary",
        data={"section": "top", "index": "1"},
        additional=['hidden'],
    )

    assert attributes == [
        'id="main"',
        'class="p-4 bg-white"',
        'role="navigation"',
        'aria-label="Primary"',
        'data-section="top"',
        'data-index="1"',
        "hidden",
    ]


def test_empty_values_are_omitted() -> None:
    assert build_attributes(id="", classes=[], role=None, label="", data={"x": ""}) == []
    assert render_tag("div", build_attributes(classes=[])) == "<div></div>"


def test_attribute_values_are_escaped() -> None:
    assert attribute("title", 'a "b" & <c>') == 'title="a &quot;b&quot; &amp; &lt;c&gt;"'
    assert attribute("alt", None) is None
    assert attribute("disabled", True) == "disabled"
    assert attribute("disabled", False) is None


def test_boolean_attribute() -> None:
    assert boolean_attribute("defer", True) == "defer"
    assert boolean_attribute("defer", False) is None


def test_additional_mapping_renders_in_order() -> None:
    attributes = build_attributes(additional={"type": "text", "required": True, "hidden": False})

    assert attributes == ['type="text"', "required"]


def test_void_elements_ignore_content() -> None:
    assert render_tag("img", ['src="a.png"'], "ignored") == '<img src="a.png">'
    assert render_tag("br") == "<br>"
    assert render_tag("p", [], "text") == "<p>text</p>"
