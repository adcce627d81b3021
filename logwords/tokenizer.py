from collections import Counter
from typing import Dict, Iterable, Iterator


def _is_word_char(c):
    return c.isascii() and c.isalnum()


def tokenize_line(line):
    if not line or not isinstance(line, str):
        return []
    tokens = []
    buf = []
    for c in line:
        if _is_word_char(c):
            # lower() only changes A-Z here
            buf.append(c.lower())
        elif buf:
            tokens.append(''.join(buf))
            buf.clear()
    # end of line is a separator
    if buf:
        tokens.append(''.join(buf))
    return tokens


def iter_tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from tokenize_line(line)


def count_words(lines: Iterable[str]) -> Dict[str, int]:
    """Build the word -> count map for all tokens in ``lines``."""
    return dict(Counter(iter_tokens(lines)))
