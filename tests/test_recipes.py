import pytest

from _lextok.combinators import at_least_one, bind, exactly, maybe, observe, one_of
from _lextok.common import char_token, digit, newline, str_token, upper_alphabet
from _lextok.cursor import Cursor
from _lextok.observers import collect
from _lextok.recipes import (
    cgpaddr_response,
    hex_number,
    ipv4_address,
    quoted_string,
    signed_integer,
)

from .generators.buffers import buffer_kinds, make_buffer


@pytest.fixture(params=buffer_kinds)
def make_cursor(request):
    def make(contents):
        return Cursor(make_buffer(contents, request.param))

    return make


def test_airline_code(make_cursor):
    airline = []
    flight_number = []
    tokenizer = bind(
        at_least_one(upper_alphabet(), collect(airline)),
        at_least_one(digit(), lambda token: flight_number.append(int(str(token)))),
    )
    cursor = make_cursor("AA535")
    assert str(tokenizer(cursor)) == "AA535"
    assert airline == ["AA"]
    assert flight_number == [535]


def test_cgpaddr_response(make_cursor):
    ip = []
    inp = "\r\n+CGPADDR: 128.14.178.01\r\n"
    cursor = make_cursor(inp)
    token = cgpaddr_response(collect(ip))(cursor)
    assert str(token) == inp
    assert ip == ["128.14.178.01"]
    assert len(cursor) == 0


def test_cgpaddr_composed_by_hand(make_cursor):
    ip = []
    inp = "\r\n+CGPADDR: 128.14.178.01\r\n"
    octet = at_least_one(digit())
    tokenizer = (
        str_token("\r\n+CGPADDR: ")
        & observe(octet & exactly(char_token(".") & octet, 3), collect(ip))
        & exactly(newline(), 2)
    )
    assert str(tokenizer(make_cursor(inp))) == inp
    assert ip == ["128.14.178.01"]


@pytest.mark.parametrize(
    "inp",
    [
        "\r\n+CGPADDR: 128.14.178\r\n",
        "\r\n+CGPADDR: 128.14.178.01\r",
        "\n+CGPADDR: 128.14.178.01\r\n",
        "\r\n+CGPADDR 128.14.178.01\r\n",
    ],
)
def test_cgpaddr_response_mismatch(make_cursor, inp):
    cursor = make_cursor(inp)
    assert cgpaddr_response()(cursor) is None
    assert cursor.tell() == 0


def test_ipv4_address_leaves_rest(make_cursor):
    cursor = make_cursor("10.0.0.1:8080")
    assert str(ipv4_address()(cursor)) == "10.0.0.1"
    assert str(cursor) == ":8080"


def test_quoted_string(make_cursor):
    body = []
    cursor = make_cursor('"this is a string"')
    token = quoted_string(collect(body))(cursor)
    assert str(token) == '"this is a string"'
    assert body == ["this is a string"]


@pytest.mark.parametrize("inp", ['""', '"unterminated', "no quotes"])
def test_quoted_string_mismatch(make_cursor, inp):
    cursor = make_cursor(inp)
    assert quoted_string()(cursor) is None
    assert cursor.tell() == 0


@pytest.mark.parametrize(
    "inp, expected", [("-19C", -19), ("+7", 7), ("19", 19), ("007x", 7)]
)
def test_signed_integer(make_cursor, inp, expected):
    values = []
    signed_integer(lambda token: values.append(int(str(token))))(make_cursor(inp))
    assert values == [expected]


def test_hex_number(make_cursor):
    digits = []
    assert str(hex_number(collect(digits))(make_cursor("0xA22b3a"))) == "0xA22b3a"
    assert int(digits[0], 16) == 0xA22B3A


@pytest.mark.parametrize(
    "inp, expected_value, expected_unit",
    [("19C", 19, "C"), ("-40F", -40, "F"), ("0C", 0, "C")],
)
def test_temperature(make_cursor, inp, expected_value, expected_unit):
    sign = 1
    value = 0
    unit = None

    def set_sign(token):
        nonlocal sign
        sign = -1 if str(token) == "-" else 1

    def accumulate(token):
        nonlocal value
        value = value * 10 + int(str(token))

    def set_unit(token):
        nonlocal unit
        unit = str(token)

    tokenizer = (
        maybe(char_token("-"), set_sign)
        & at_least_one(digit(accumulate))
        & one_of(char_token("C"), char_token("F"), observer=set_unit)
    )
    cursor = make_cursor(inp)
    assert str(tokenizer(cursor)) == inp
    assert len(cursor) == 0
    assert sign * value == expected_value
    assert unit == expected_unit


def test_temperature_without_unit(make_cursor):
    tokenizer = (
        maybe(char_token("-"))
        & at_least_one(digit())
        & (char_token("C") | char_token("F"))
    )
    cursor = make_cursor("19K")
    assert tokenizer(cursor) is None
    assert cursor.tell() == 0
