"""
Alphabet membership helpers shared by every sequence kind.
"""
from enum import Enum
from typing import Iterable, Hashable, Union


def contains(sequence: Iterable[Hashable], value: Hashable) -> bool:
    """Returns True iff value occurs anywhere in sequence"""
    return any(item == value for item in sequence)


def is_valid(sequence: Iterable[str], alphabet: Union[Enum, Iterable[str]]) -> bool:
    """Returns True iff every symbol of sequence is a member of alphabet.

    Parameters
    ----------
    sequence
        Symbols to check. Any iterable of single characters, including a :class:`~biolib.sequence.Sequence`.
    alphabet
        Either an :class:`~biolib.sequence.Alphabet` member or any iterable of allowed symbols.
    """
    symbols = alphabet.value if isinstance(alphabet, Enum) else alphabet
    return all(contains(symbols, c) for c in sequence)


def pct(frac: float) -> float:
    """Converts a fraction to a percentage for display"""
    return 100 * frac
