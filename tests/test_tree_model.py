from jsonml.tree_model import (
    NullValue,
    NumberValue,
    StringValue,
    Tag,
    Text,
    float32_digits,
    text_from_str,
    to_float32,
)


def test_default_element_is_empty_text() -> None:
    assert Text() == Text("")


def test_text_from_str() -> None:
    assert text_from_str("First Item") == Text("First Item")


def test_tag_defaults_are_not_shared() -> None:
    first = Tag(name="a")
    second = Tag(name="a")
    first.children.append(Text("x"))
    assert second.children == []
    assert second.attributes == {}


def test_attribute_order_does_not_affect_equality() -> None:
    a = Tag(name="li", attributes={"title": StringValue("t"), "style": StringValue("s")})
    b = Tag(name="li", attributes={"style": StringValue("s"), "title": StringValue("t")})
    assert a == b


def test_children_order_affects_equality() -> None:
    assert Tag(name="p", children=[Text("a"), Text("b")]) != Tag(
        name="p", children=[Text("b"), Text("a")]
    )


def test_text_and_string_value_are_distinct() -> None:
    assert Text("x") != StringValue("x")
    assert NullValue() == NullValue()


def test_number_value_is_single_precision() -> None:
    assert NumberValue(3.14).value == to_float32(3.14)
    assert NumberValue(3.14) == NumberValue(3.140000104904175)
    assert NumberValue(1) == NumberValue(1.0)
    assert to_float32(1e300) == float("inf")


def test_float32_digits_is_shortest() -> None:
    assert float32_digits(to_float32(3.14)) == "3.14"
    assert float32_digits(to_float32(0.1)) == "0.1"
    assert float32_digits(1.0) == "1"
    assert float32_digits(float("-inf")) == "-inf"
