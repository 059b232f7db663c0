import numpy as np

from _lextok.span import Span


def _as_buffer(buffer):
    if isinstance(buffer, (str, bytes, bytearray)):
        return buffer
    if isinstance(buffer, memoryview):
        if buffer.ndim != 1:
            raise TypeError(f"Expected one dimensional memoryview, got {buffer.ndim}")
        if buffer.format != "B":
            buffer = buffer.cast("B")
        return buffer
    if isinstance(buffer, np.ndarray):
        if buffer.ndim != 1 or buffer.dtype != np.uint8:
            raise TypeError(
                "Expected one dimensional array of uint8, "
                f"got {buffer.ndim} dimensional array of {buffer.dtype}"
            )
        return buffer
    raise TypeError(f"Unsupported buffer type {type(buffer).__name__}")


class Cursor:
    """
    A view of the unconsumed part of a buffer. Tokenizers advance the
    cursor past what they match, and seek back to where they started
    when they fail.

    The buffer can be a str, bytes, bytearray, memoryview or one
    dimensional numpy array of uint8. Regardless of the buffer, units
    are given as one character strings, ie. for b"abc", cursor[0] == "a".
    Bytes are interpreted as latin-1.

    >>> cursor = Cursor("aBCd12434")
    >>> cursor.startswith("aB")
    True
    >>> cursor.remove_prefix(4)
    >>> str(cursor)
    '12434'

    """

    def __init__(self, buffer, start=0, end=None):
        """
        :param buffer: The input to tokenize.
        :param start: Position in the buffer where the input starts.
        :param end: Position in the buffer where the input ends, defaults
            to the end of the buffer.
        """
        self._buffer = _as_buffer(buffer)
        self._is_text = isinstance(self._buffer, str)
        if end is None:
            end = len(self._buffer)
        if not 0 <= start <= end <= len(self._buffer):
            raise ValueError(
                f"Invalid bounds start={start}, end={end} "
                f"for buffer of length {len(self._buffer)}"
            )
        self._origin = start
        self._position = start
        self._end = end

    @property
    def buffer(self):
        return self._buffer

    def tell(self):
        """
        :returns: The current position in the buffer.
        """
        return self._position

    def seek(self, position):
        """
        Move the cursor to the given buffer position, typically one
        previously returned by tell().
        """
        if not self._origin <= position <= self._end:
            raise ValueError(
                f"Cannot seek to {position}, "
                f"input is between {self._origin} and {self._end}"
            )
        self._position = position

    def __len__(self):
        return self._end - self._position

    def __getitem__(self, index):
        if not 0 <= index < len(self):
            raise IndexError(f"Cursor index {index} out of range")
        unit = self._buffer[self._position + index]
        if self._is_text:
            return unit
        return chr(unit)

    def startswith(self, literal):
        """
        :param literal: A str to compare against the start of
            the remaining input.
        :returns: Whether the remaining input starts with literal.
        """
        if len(literal) > len(self):
            return False
        if self._is_text:
            return self._buffer.startswith(literal, self._position, self._end)
        try:
            encoded = literal.encode("latin-1")
        except UnicodeEncodeError:
            return False
        window = self._buffer[self._position : self._position + len(encoded)]
        if isinstance(window, np.ndarray):
            window = window.tobytes()
        return window == encoded

    def remove_prefix(self, length):
        """
        Consume the given number of units from the start of the input.
        """
        if not 0 <= length <= len(self):
            raise ValueError(
                f"Cannot remove {length} units, only {len(self)} remaining"
            )
        self._position += length

    def span_from(self, position):
        """
        :returns: Span of everything consumed since the given position.
        """
        return Span(self._buffer, position, self._position)

    def __str__(self):
        return str(Span(self._buffer, self._position, self._end))

    def __repr__(self):
        return f"Cursor(position={self._position}, remaining={str(self)!r})"
