"""
In this module, a tokenizer is a callable that takes a cursor over some
input and returns the span of input it matched, advancing the cursor past
it. If the input does not match, the tokenizer returns None and leaves the
cursor where it started.

Token combinator is any function which returns a tokenizer.

Tokenizers are greedy and only backtrack on failure: repetitions never
give back units to let a later tokenizer match, and one_of picks the first
alternative that succeeds, not the longest.
"""
