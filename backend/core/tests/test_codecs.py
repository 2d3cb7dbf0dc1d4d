import pytest

from core.codecs import decode_tech_stack, encode_tech_stack


def test_encode_then_decode_keeps_order_and_contents():
    stack = ["Python", "Django", "PostgreSQL", "Python"]
    assert decode_tech_stack(encode_tech_stack(stack)) == stack


def test_encode_empty_and_none():
    assert encode_tech_stack([]) == "[]"
    assert encode_tech_stack(None) == "[]"


@pytest.mark.parametrize("raw", ["", None, "not json", "{\"a\": 1}", "[1, 2]", "\"React\"", "[\"ok\", null]"])
def test_malformed_values_decode_to_empty_list(raw):
    assert decode_tech_stack(raw) == []


def test_decode_accepts_already_decoded_list():
    assert decode_tech_stack(["React", "CSS"]) == ["React", "CSS"]


def test_unicode_survives():
    assert decode_tech_stack(encode_tech_stack(["C++", "Go – Ünïcode"])) == ["C++", "Go – Ünïcode"]
