from _lextok.errors import CombinatorError


class Tokenizer:
    """
    A tokenizer is a callable taking a Cursor, returning the Span it
    matched and advancing the cursor past it, or returning None and
    leaving the cursor where it was.

    This class wraps such a callable so that tokenizers can be combined
    with & (in sequence) and | (first alternative that succeeds).
    Tokenizers carry no state of their own and can be reused for any
    number of cursors.
    """

    __slots__ = ("_match", "name")

    def __init__(self, match, name=None):
        self._match = match
        self.name = name or getattr(match, "__name__", type(match).__name__)

    def __call__(self, cursor):
        return self._match(cursor)

    def __and__(self, other):
        from _lextok.combinators import bind

        return bind(self, other)

    def __rand__(self, other):
        from _lextok.combinators import bind

        return bind(other, self)

    def __or__(self, other):
        from _lextok.combinators import one_of

        return one_of(self, other)

    def __ror__(self, other):
        from _lextok.combinators import one_of

        return one_of(other, self)

    def __repr__(self):
        return f"Tokenizer({self.name})"


def as_tokenizer(tokenizer):
    """
    :param tokenizer: A Tokenizer or any callable taking a cursor.
    :returns: The corresponding Tokenizer.
    :raises CombinatorError: If given something that is not callable.
    """
    if isinstance(tokenizer, Tokenizer):
        return tokenizer
    if not callable(tokenizer):
        raise CombinatorError(f"Expected a tokenizer, got {tokenizer!r}")
    return Tokenizer(tokenizer)
