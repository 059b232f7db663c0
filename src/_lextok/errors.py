class CombinatorError(Exception):
    """
    Raised when a tokenizer is built from arguments that can never form a
    valid tokenizer, for instance an observer that does not accept a span,
    or a negative repetition count. This happens when the tokenizer value
    is constructed, never while matching.
    """

    pass


class EmptyRepetitionWarning(UserWarning):
    """
    Emitted when the tokenizer inside a repetition succeeds without
    consuming any input. The repetition stops at that point as it
    would otherwise never terminate.
    """

    pass
