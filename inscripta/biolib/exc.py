class BioLibException(Exception):
    """
    Base exception class for BioLib.
    """

    pass


class AlphabetError(BioLibException):
    """
    Raised when an operation on an Alphabet is unsupported for the provided Alphabet.
    """

    pass


class InvalidSequenceError(AlphabetError):
    """
    Raised when sequence data contains symbols that are not members of its Alphabet.
    """

    pass


class UnknownSymbolError(AlphabetError):
    """
    Raised when a symbol has no mapping in a lookup table, such as a base with no complement or
    a codon with no translation.
    """

    pass


class EmptySequenceError(BioLibException):
    """
    Raised when an operation that requires a non-empty Sequence is performed on an empty Sequence.
    """

    pass


class EmptySequenceFastaError(EmptySequenceError):
    """
    Raised when FASTA export is attempted on an empty Sequence object.
    """

    pass


class SequenceLengthWarning(UserWarning):
    """
    Used when two sequences of different lengths are compared position by position.
    """

    pass


class PartialCodonWarning(UserWarning):
    """
    Used when a translated sequence ends with an incomplete codon that is dropped.
    """

    pass
