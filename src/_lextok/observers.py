"""
An observer is any callable taking one Span, called when the tokenizer
it is attached to succeeds. Its return value is ignored.
"""
import inspect

from _lextok.errors import CombinatorError


def none(token):
    """
    The default observer, does nothing with the token.
    """
    pass


def validate_observer(observer):
    """
    :param observer: Any callable accepting one positional argument,
        or None.
    :returns: The observer, or the no-op observer if given None.
    :raises CombinatorError: If observer cannot be called with a span.
    """
    if observer is None:
        return none
    if not callable(observer):
        raise CombinatorError(f"Observer {observer!r} is not callable")
    try:
        signature = inspect.signature(observer)
    except (TypeError, ValueError):
        # Some builtins do not expose a signature
        return observer
    try:
        signature.bind(None)
    except TypeError as err:
        raise CombinatorError(
            f"Observer {observer!r} can not be called with a single token: {err}"
        ) from err
    return observer


def collect(target):
    """
    Observer combinator that appends the text of every observed
    token to target.

    >>> found = []
    >>> observer = collect(found)
    """

    def collect_observer(token):
        target.append(str(token))

    return collect_observer
