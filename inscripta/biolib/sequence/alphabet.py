from enum import Enum


class Alphabet(Enum):
    DNA = "ACGT"
    RNA = "ACGU"
    PROTEIN = "ACDEFGHIKLMNPQRSTVWY*"

    def is_nucleotide_alphabet(self) -> bool:
        return self in (Alphabet.DNA, Alphabet.RNA)


ALPHABET_TO_NUCLEOTIDE_COMPLEMENT = {
    Alphabet.DNA: {"A": "T", "C": "G", "G": "C", "T": "A"},
}

# (source, target) -> (symbol replaced, replacement)
TRANSCRIPTION_SUBSTITUTIONS = {
    (Alphabet.DNA, Alphabet.RNA): ("T", "U"),
    (Alphabet.RNA, Alphabet.DNA): ("U", "T"),
}
