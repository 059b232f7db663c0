from dataclasses import dataclass, field


@dataclass(frozen=True)
class Span:
    """
    A matched, contiguous part of an input buffer, ie. Span(buffer, 2, 5)
    refers to buffer[2:5]. The span does not copy the buffer, and the
    buffer has to outlive every span derived from it.

    Note that an empty span is a successful (zero length) match, so
    results of tokenizers should be compared to None, not tested
    for truthiness.
    """

    buffer: object = field(repr=False, compare=False)
    start: int
    end: int

    def __len__(self):
        return self.end - self.start

    @property
    def value(self):
        """
        :returns: The matched part of the buffer, of the same type as the
            buffer. For memoryview and numpy buffers this is a view.
        """
        return self.buffer[self.start : self.end]

    def __str__(self):
        value = self.value
        if isinstance(value, str):
            return value
        return bytes(value).decode("latin-1")
