"""
Token combinators, ie. functions taking tokenizers and returning a new
tokenizer. Every combinator that can fail seeks the cursor back to where
it started before returning None, so the alternatives of one_of always
start from the same position.

All combinators take an optional observer which is called once with the
span of the combined match.
"""
import numbers
import warnings

from _lextok.errors import CombinatorError, EmptyRepetitionWarning
from _lextok.observers import validate_observer
from _lextok.tokenizer import Tokenizer, as_tokenizer


def bind(*tokenizers, observer=None):
    """
    Combinator for tokenizers in sequence.

    :param tokenizers: List of tokenizers.
    :returns: A tokenizer that matches each tokenizer in turn, the
        resulting span covering all of them. If any of the tokenizers
        fail, the cursor is put back to where the first one started.
    """
    if not tokenizers:
        raise CombinatorError("bind requires at least one tokenizer")
    tokenizers = [as_tokenizer(tok) for tok in tokenizers]
    observer = validate_observer(observer)

    def bind_tokenizer(cursor):
        start = cursor.tell()
        for tok in tokenizers:
            if tok(cursor) is None:
                cursor.seek(start)
                return None
        token = cursor.span_from(start)
        observer(token)
        return token

    return Tokenizer(bind_tokenizer, " & ".join(tok.name for tok in tokenizers))


def one_of(*tokenizers, observer=None):
    """
    Combinator for tokenizers.

    :param tokenizers: List of tokenizers.
    :returns: A tokenizer that returns the span of the
        first tokenizer in tokenizers that succeeds.
    """
    if not tokenizers:
        raise CombinatorError("one_of requires at least one tokenizer")
    tokenizers = [as_tokenizer(tok) for tok in tokenizers]
    observer = validate_observer(observer)

    def one_of_tokenizer(cursor):
        start = cursor.tell()
        for tok in tokenizers:
            token = tok(cursor)
            if token is not None:
                observer(token)
                return token
            cursor.seek(start)
        return None

    return Tokenizer(one_of_tokenizer, " | ".join(tok.name for tok in tokenizers))


def _repeat(tokenizer, cursor):
    while len(cursor) > 0:
        token = tokenizer(cursor)
        if token is None:
            return
        if len(token) == 0:
            warnings.warn(
                f"{tokenizer.name} matched empty input inside a repetition, "
                "stopping the repetition",
                EmptyRepetitionWarning,
            )
            return


def repeated(tokenizer, observer=None):
    """
    Combinator for tokenizer.
    :param tokenizer: Any tokenizer.
    :returns: Tokenizer that applies the tokenizer zero or more times, until it
        fails. Never fails itself, the span may be empty.
    """
    tokenizer = as_tokenizer(tokenizer)
    observer = validate_observer(observer)

    def repeated_tokenizer(cursor):
        start = cursor.tell()
        _repeat(tokenizer, cursor)
        token = cursor.span_from(start)
        observer(token)
        return token

    return Tokenizer(repeated_tokenizer, f"repeated({tokenizer.name})")


def at_least_one(tokenizer, observer=None):
    """
    Same as repeated, but the tokenizer has to succeed at least once.
    """
    tokenizer = as_tokenizer(tokenizer)
    observer = validate_observer(observer)

    def at_least_one_tokenizer(cursor):
        start = cursor.tell()
        if tokenizer(cursor) is None:
            return None
        _repeat(tokenizer, cursor)
        token = cursor.span_from(start)
        observer(token)
        return token

    return Tokenizer(at_least_one_tokenizer, f"at_least_one({tokenizer.name})")


def exactly(tokenizer, count, observer=None):
    """
    :param tokenizer: Any tokenizer.
    :param count: Number of times the tokenizer has to match in sequence.
    :returns: Tokenizer matching tokenizer count times. exactly(tok, 0)
        always succeeds with an empty span without calling tok.
    """
    tokenizer = as_tokenizer(tokenizer)
    if (
        not isinstance(count, numbers.Integral)
        or isinstance(count, bool)
        or count < 0
    ):
        raise CombinatorError(f"count must be a non-negative integer, got {count!r}")
    observer = validate_observer(observer)

    def exactly_tokenizer(cursor):
        start = cursor.tell()
        for _ in range(count):
            if tokenizer(cursor) is None:
                cursor.seek(start)
                return None
        token = cursor.span_from(start)
        observer(token)
        return token

    return Tokenizer(exactly_tokenizer, f"exactly({tokenizer.name}, {count})")


def maybe(tokenizer, observer=None):
    """
    Tokenizer that matches tokenizer if possible, and otherwise succeeds
    with an empty span. The observer is called in both cases, so it can
    set a default when nothing matched.
    """
    tokenizer = as_tokenizer(tokenizer)
    observer = validate_observer(observer)

    def maybe_tokenizer(cursor):
        token = tokenizer(cursor)
        if token is None:
            token = cursor.span_from(cursor.tell())
        observer(token)
        return token

    return Tokenizer(maybe_tokenizer, f"maybe({tokenizer.name})")


def observe(tokenizer, observer):
    """
    Attach an observer to any tokenizer. The resulting tokenizer matches
    exactly what tokenizer matches, and calls observer on success.
    """
    if observer is None:
        raise CombinatorError("observe requires an observer")
    tokenizer = as_tokenizer(tokenizer)
    observer = validate_observer(observer)

    def observed_tokenizer(cursor):
        token = tokenizer(cursor)
        if token is not None:
            observer(token)
        return token

    return Tokenizer(observed_tokenizer, tokenizer.name)
