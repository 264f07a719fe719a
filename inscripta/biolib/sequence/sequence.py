import warnings
from typing import Optional, Union, NamedTuple, Iterator, Dict, Any

from Bio.Seq import Seq
from methodtools import lru_cache

from inscripta.biolib.exc import (
    AlphabetError,
    InvalidSequenceError,
    UnknownSymbolError,
    EmptySequenceError,
    EmptySequenceFastaError,
    SequenceLengthWarning,
)
from inscripta.biolib.sequence.alphabet import Alphabet, ALPHABET_TO_NUCLEOTIDE_COMPLEMENT
from inscripta.biolib.util.validation import is_valid


class NucleotideCount(NamedTuple):
    """Composition tally of a sequence. ``other`` collects every symbol that is not A, C or G; for DNA this is the
    T count and for RNA the U count."""

    a: int
    c: int
    g: int
    other: int


class Sequence:
    """A sequence with an alphabet"""

    sequence: Seq

    def __init__(
        self,
        data: str,
        alphabet: Alphabet,
        id: Optional[str] = None,
        validate_alphabet: bool = True,
    ):
        """
        Parameters
        ----------
            data
                The contents of the sequence. Converted to upper case.
            alphabet
                Alphabet
            id
                Sequence name
            validate_alphabet
                Whether to validate this sequence against its alphabet. If False, the sequence may hold symbols
                outside of its alphabet; use :meth:`is_valid()` to check.
        """
        self.sequence = Seq(str(data).upper())
        self.alphabet = alphabet
        self.id = id
        self._len = len(self.sequence)
        if validate_alphabet:
            self._validate_alphabet()

    def __eq__(self, other):
        if type(other) is not Sequence:
            return False
        if self.id != other.id:
            return False
        if self.alphabet != other.alphabet:
            return False
        return self.sequence == other.sequence

    def __hash__(self):
        return hash((self.id, self.alphabet, str(self.sequence)))

    def __str__(self):
        """Returns the sequence data as a string"""
        return str(self.sequence)

    def __len__(self):
        return self._len

    def __iter__(self) -> Iterator[str]:
        return iter(str(self))

    def __getitem__(self, key: Union[int, slice]) -> "Sequence":
        """Returns a slice of the current Sequence as a new Sequence object"""
        return Sequence(str(self.sequence[key]), self.alphabet, validate_alphabet=False)

    def __repr__(self):
        return "<{}>".format(self.summary())

    def summary(self) -> str:
        """Returns a short string summary of this Sequence"""
        if self.id:
            id = self.id
        else:
            if len(self) <= 20:
                id = "Sequence={}".format(str(self))
            else:
                id = "Sequence"
        return "{};\n  Alphabet={};\n  Length={}".format(id, self.alphabet.name, len(self))

    def _validate_alphabet(self):
        """Raises InvalidSequenceError if this Sequence does not conform to its alphabet"""
        Sequence.validate_alphabet(str(self), self.alphabet)

    @staticmethod
    def validate_alphabet(sequence: str, alphabet: Alphabet):
        if not is_valid(sequence, alphabet):
            raise InvalidSequenceError("Invalid sequence for alphabet {}".format(alphabet.name))

    def is_valid(self) -> bool:
        """Returns True iff every symbol of this Sequence is in its alphabet"""
        return is_valid(self, self.alphabet)

    @property
    def is_empty(self) -> bool:
        """Is this a len 0 sequence?"""
        return self._len == 0

    @lru_cache(maxsize=1)
    def count(self) -> NucleotideCount:
        """Returns the number of A, C and G symbols in this Sequence, plus the number of all other symbols.
        The four values always sum to the length of the Sequence.
        """
        data = str(self)
        a = data.count("A")
        c = data.count("C")
        g = data.count("G")
        return NucleotideCount(a, c, g, self._len - a - c - g)

    @lru_cache(maxsize=1)
    def gc_content(self) -> float:
        """Returns the fraction of G and C symbols in this Sequence, between 0 and 1.

        Raises
        ------
        EmptySequenceError
            If this Sequence is empty.
        """
        if self.is_empty:
            raise EmptySequenceError("GC content is undefined for an empty Sequence")
        _, c, g, _ = self.count()
        return (c + g) / self._len

    def distance(self, other: "Sequence") -> int:
        """Returns the Hamming distance between this Sequence and another sequence.

        Only positions up to the end of the shorter sequence are compared; any excess length on the longer
        sequence does not contribute to the distance. Comparing against an empty sequence is therefore 0.
        A :class:`~biolib.exc.SequenceLengthWarning` is emitted when the lengths differ.

        Parameters
        ----------
        other
            Other sequence. Anything that iterates over symbols works, including a plain string.
        """
        if len(self) != len(other):
            warnings.warn(
                SequenceLengthWarning(
                    "Comparing sequences of length {} and {}; only the first {} positions are compared".format(
                        len(self), len(other), min(len(self), len(other))
                    )
                )
            )
        return sum(1 for c1, c2 in zip(self, other) if c1 != c2)

    def reverse_complement(self, new_id: Optional[str] = None) -> "Sequence":
        """Returns a new Sequence corresponding to the reverse complement of this Sequence.

        Parameters
        ----------
        new_id
            ID for the returned Sequence. If no value is provided, the ID of this Sequence is used.

        Raises
        ------
        AlphabetError
            If this Sequence is not DNA.
        UnknownSymbolError
            If this Sequence contains a symbol that has no complement.
        """
        if self.alphabet not in ALPHABET_TO_NUCLEOTIDE_COMPLEMENT:
            raise AlphabetError("Cannot reverse complement sequence with alphabet {}".format(self.alphabet))
        rc_map = ALPHABET_TO_NUCLEOTIDE_COMPLEMENT[self.alphabet]
        try:
            seq_data = "".join([rc_map[c] for c in str(self)[::-1]])
        except KeyError as e:
            raise UnknownSymbolError("Character {} not found for alphabet {}".format(str(e), self.alphabet))
        return Sequence(seq_data, self.alphabet, id=new_id if new_id is not None else self.id, validate_alphabet=False)

    def to_fasta(self, num_chars: Optional[int] = 60) -> str:
        """Returns a FASTA-formatted string for this sequence. These are line-broken every num_chars.

        Parameters
        ----------
        num_chars:
            Number of characters per line. Defaults to 60, which is the same as BioPython.
        """
        if self.is_empty:
            raise EmptySequenceFastaError("Cannot write FASTA for empty Sequence")

        r = [f">{self.id or ''}"]
        for i in range(0, self._len, num_chars):
            r.append(str(self)[i : i + num_chars])
        return "\n".join(r)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dict usable by :class:`biolib.models.SequenceModel`."""
        return dict(sequence=str(self), alphabet=self.alphabet.name, id=self.id)
