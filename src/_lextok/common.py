from _lextok.errors import CombinatorError
from _lextok.observers import validate_observer
from _lextok.tokenizer import Tokenizer


def _as_text(chars):
    if isinstance(chars, (bytes, bytearray)):
        return chars.decode("latin-1")
    if not isinstance(chars, str):
        raise CombinatorError(f"Expected str or bytes, got {chars!r}")
    return chars


def single_char(predicate, observer=None, name=None):
    """
    Token combinator for tokens consisting of one unit accepted by the
    predicate, ie. single_char(str.isdigit) matches "7" at the start of
    "7up" and leaves "up".

    :param predicate: Callable taking a one character string and returning
        whether it is accepted.
    :param observer: Called with the matched span on success.
    :returns: Tokenizer for one accepted unit.
    """
    if not callable(predicate):
        raise CombinatorError(f"Predicate {predicate!r} is not callable")
    observer = validate_observer(observer)

    def single_char_tokenizer(cursor):
        if len(cursor) == 0 or not predicate(cursor[0]):
            return None
        start = cursor.tell()
        cursor.remove_prefix(1)
        token = cursor.span_from(start)
        observer(token)
        return token

    return Tokenizer(single_char_tokenizer, name or "single_char")


def str_token(literal, observer=None):
    """
    Token combinator for fixed words, ie. when the input starts with
    '+CGPADDR: ' str_token('+CGPADDR: ') matches those 10 units.
    The comparison is exact and case sensitive.

    :param literal: Non-empty str or bytes to be matched.
    :param observer: Called with the matched span on success.
    """
    literal = _as_text(literal)
    if not literal:
        raise CombinatorError("Cannot tokenize an empty literal")
    observer = validate_observer(observer)

    def word_tokenizer(cursor):
        if not cursor.startswith(literal):
            return None
        start = cursor.tell()
        cursor.remove_prefix(len(literal))
        token = cursor.span_from(start)
        observer(token)
        return token

    return Tokenizer(word_tokenizer, f"str_token({literal!r})")


def char_token(char, observer=None):
    char = _as_text(char)
    if len(char) != 1:
        raise CombinatorError(f"char_token expects a single character, got {char!r}")
    return single_char(char.__eq__, observer, f"char_token({char!r})")


def any_char_of(group, observer=None):
    """
    Tokenizer matching one unit that is in group, ie. any_char_of("+-")
    matches a sign.
    """
    group = frozenset(_as_text(group))
    return single_char(group.__contains__, observer, "any_char_of")


def none_of(group, observer=None):
    """
    Tokenizer matching one unit that is not in group, ie. none_of('"')
    matches any character of a quoted string body. Fails at end of
    input as there is no unit to match.
    """
    group = frozenset(_as_text(group))
    return single_char(lambda char: char not in group, observer, "none_of")


def _is_lower(char):
    return "a" <= char <= "z"


def _is_upper(char):
    return "A" <= char <= "Z"


def _is_digit(char):
    return "0" <= char <= "9"


def alphabet(observer=None):
    """[a-zA-Z]"""
    return single_char(
        lambda char: _is_lower(char) or _is_upper(char), observer, "alphabet"
    )


def lower_alphabet(observer=None):
    """[a-z]"""
    return single_char(_is_lower, observer, "lower_alphabet")


def upper_alphabet(observer=None):
    """[A-Z]"""
    return single_char(_is_upper, observer, "upper_alphabet")


def digit(observer=None):
    """[0-9]"""
    return single_char(_is_digit, observer, "digit")


decimal_digit = digit


def hex_digit(observer=None):
    """[0-9a-fA-F]"""
    return single_char(
        lambda char: _is_digit(char) or "a" <= char <= "f" or "A" <= char <= "F",
        observer,
        "hex_digit",
    )


def whitespace(observer=None):
    """[ \\t\\r\\n]"""
    return any_char_of(" \t\r\n", observer)


def newline(observer=None):
    """[\\r\\n]"""
    return any_char_of("\r\n", observer)


def any_char(observer=None):
    """Any single unit."""
    return single_char(lambda char: True, observer, "any_char")
