from .validator import validate_wordlists, pretty_summary, split_words
from .io import read_lines, read_words

__all__ = ["validate_wordlists", "pretty_summary", "split_words", "read_lines", "read_words"]
