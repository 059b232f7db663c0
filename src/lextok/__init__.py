import lextok.version
from _lextok.combinators import (
    at_least_one,
    bind,
    exactly,
    maybe,
    observe,
    one_of,
    repeated,
)
from _lextok.common import (
    alphabet,
    any_char,
    any_char_of,
    char_token,
    decimal_digit,
    digit,
    hex_digit,
    lower_alphabet,
    newline,
    none_of,
    single_char,
    str_token,
    upper_alphabet,
    whitespace,
)
from _lextok.cursor import Cursor
from _lextok.errors import CombinatorError, EmptyRepetitionWarning
from _lextok.recipes import (
    cgpaddr_response,
    hex_number,
    ipv4_address,
    quoted_string,
    signed_integer,
)
from _lextok.span import Span
from _lextok.tokenizer import Tokenizer

__version__ = lextok.version.version

__all__ = [
    "CombinatorError",
    "Cursor",
    "EmptyRepetitionWarning",
    "Span",
    "Tokenizer",
    "alphabet",
    "any_char",
    "any_char_of",
    "at_least_one",
    "bind",
    "cgpaddr_response",
    "char_token",
    "decimal_digit",
    "digit",
    "exactly",
    "hex_digit",
    "hex_number",
    "ipv4_address",
    "lower_alphabet",
    "maybe",
    "newline",
    "none_of",
    "observe",
    "one_of",
    "quoted_string",
    "repeated",
    "signed_integer",
    "single_char",
    "str_token",
    "upper_alphabet",
    "whitespace",
]
