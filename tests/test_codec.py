import pytest
from query_string import codec
from query_string.utils import split_on_first, to_str


def test_encode_strict():
    assert codec.encode("a b&c=d") == "a%20b%26c%3Dd"
    assert codec.encode("!'()*") == "%21%27%28%29%2A"
    assert codec.encode("-._~") == "-._~"


def test_encode_lenient():
    assert codec.encode("!'()*", strict=False) == "!'()*"
    assert codec.encode("a b", strict=False) == "a%20b"


def test_encode_unicode():
    assert codec.encode("café") == "caf%C3%A9"


def test_encode_scalars():
    assert codec.encode(1) == "1"
    assert codec.encode(True) == "true"
    assert codec.encode(2.0) == "2"


def test_decode():
    assert codec.decode("caf%C3%A9") == "café"
    assert codec.decode("%26%3D%3F") == "&=?"
    assert codec.decode("plain") == "plain"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("%zz", "%zz"),
        ("100%", "100%"),
        ("%", "%"),
        ("%FF", "%FF"),
        ("%ff", "%ff"),
        ("%c3%28", "%c3("),
        ("caf%c3%a9%fe", "café%fe"),
        ("a%C3%A9%FF", "aé%FF"),
        ("%E0%A4%A", "%E0%A4%A"),
    ],
)
def test_decode_malformed(value, expected):
    assert codec.decode(value) == expected


def test_split_on_first():
    assert split_on_first("a=b=c", "=") == ["a", "b=c"]
    assert split_on_first("=x", "=") == ["", "x"]
    assert split_on_first("a=", "=") == ["a", ""]
    assert split_on_first("abc", "=") == ["abc"]
    assert split_on_first("abc", "") == ["abc"]


def test_split_on_first_types():
    with pytest.raises(TypeError):
        split_on_first(None, "=")


@pytest.mark.parametrize(
    "value, expected",
    [
        ("x", "x"),
        (1, "1"),
        (-3, "-3"),
        (1.5, "1.5"),
        (1.0, "1"),
        (True, "true"),
        (False, "false"),
        (float("nan"), "NaN"),
        (float("inf"), "Infinity"),
        (float("-inf"), "-Infinity"),
    ],
)
def test_to_str(value, expected):
    assert to_str(value) == expected
