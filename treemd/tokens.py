# treemd/tokens.py

"""Token counting for the size diagnostic printed next to a document."""


from __future__ import annotations

from functools import lru_cache

import tiktoken

DEFAULT_ENCODING = "gpt2"


@lru_cache(maxsize=None)
def get_encoding(name: str = DEFAULT_ENCODING) -> tiktoken.Encoding:
    return tiktoken.get_encoding(name)


def count_tokens(text: str, encoding_name: str = DEFAULT_ENCODING) -> int:
    """Count the tokens of ``text`` with the given tiktoken encoding."""
    return len(get_encoding(encoding_name).encode(text, disallowed_special=()))
