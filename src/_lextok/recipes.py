"""
Tokenizers for some commonly occurring tokens, built from the
atomic tokenizers and combinators. They double as examples of how
to compose tokenizers.
"""
from _lextok.combinators import at_least_one, bind, exactly, maybe
from _lextok.common import any_char_of, char_token, digit, hex_digit, newline
from _lextok.common import none_of, str_token


def quoted_string(observer=None):
    """
    Tokenizer for a string of at least one character between two double
    quotes, ie. '"this is a string"'. The observer is called with the
    body of the string, without the quotes.
    """
    return (
        char_token('"') & at_least_one(none_of('"'), observer) & char_token('"')
    )


def ipv4_address(observer=None):
    """
    Tokenizer for a dotted decimal ipv4 address, ie. "128.14.178.01".
    Octets are any number of digits, their range is not checked.
    """
    octet = at_least_one(digit())
    dotted_octet = char_token(".") & octet
    return bind(octet, exactly(dotted_octet, 3), observer=observer)


def cgpaddr_response(observer=None):
    """
    Tokenizer for the response of a modem to the AT+CGPADDR command,
    ie. "\\r\\n+CGPADDR: 128.14.178.01\\r\\n". The observer is called
    with the ip address.

    In EBNF:

        guard := ('\\r' | '\\n') ('\\r' | '\\n')
        cmd_CGPADDR := '+CGPADDR: '
        response := guard cmd_CGPADDR ipv4_addr guard
    """
    guard = exactly(newline(), 2)
    return guard & str_token("+CGPADDR: ") & ipv4_address(observer) & guard


def signed_integer(observer=None):
    """
    Tokenizer for decimal integers with an optional sign, ie. "-19".
    The observer is called with the whole integer, sign included.
    """
    return bind(maybe(any_char_of("+-")), at_least_one(digit()), observer=observer)


def hex_number(observer=None):
    """
    Tokenizer for "0x" prefixed hexadecimal numbers, ie. "0xA22b3a".
    The observer is called with the digits following the prefix.
    """
    return str_token("0x") & at_least_one(hex_digit(), observer)
