from typing import List, Union

from inscripta.biolib.constants import gencode, aacodons, STOP
from inscripta.biolib.exc import UnknownSymbolError


class Codon:
    """Enum-like class for dealing with Codons.

    Codons are stored as RNA. DNA input is accepted and transcribed, so ``Codon("ATG") is Codon("AUG")``.
    """

    __slots__ = ["_val"]
    _singletons_ = {}

    def __new__(cls, codon: Union[str, "Sequence"]):  # noqa: F821
        clean_codon = Codon._clean(codon)
        if clean_codon in cls._singletons_:
            return cls._singletons_[clean_codon]
        Codon._validate(clean_codon)
        instance = super().__new__(cls)
        cls._singletons_[clean_codon] = instance
        return instance

    def __init__(self, codon: Union[str, "Sequence"]):  # noqa: F821
        self._val = Codon._clean(codon)

    @staticmethod
    def _clean(codon: Union[str, "Sequence"]) -> str:  # noqa: F821
        return str(codon).upper().replace("T", "U")

    @staticmethod
    def _validate(clean_codon: str):
        if len(clean_codon) != 3:
            raise ValueError("Codon not a multiple of 3")
        if clean_codon.strip("ACGU") != "":
            raise ValueError(f"Unknown, non-nucleotide bases given: '{clean_codon}'")

    def __eq__(self, other) -> bool:
        """Check equality through singleton comparison"""
        return other is self

    def __repr__(self) -> str:
        """Representation string of codon, equal to what would come out of an Enum object"""
        return f"<Codon.{self._val}: {self._val}>"

    def __str__(self) -> str:
        """The codon as a string"""
        return self._val

    def __hash__(self) -> int:
        """Hash of the codon string value"""
        return hash(self._val)

    @property
    def value(self) -> str:
        """The string value of the codon, to maintain enum-like functionality"""
        return self._val

    @property
    def name(self) -> str:
        """The string value of the codon, to maintain enum-like functionality"""
        return self._val

    def translate(self) -> str:
        """Returns string symbol of translated amino acid. Stop codons translate to ``*``.

        Raises
        ------
        UnknownSymbolError
            If the codon has no entry in the codon table.
        """
        try:
            return gencode[self._val]
        except KeyError:
            raise UnknownSymbolError(f"Codon {self._val} has no translation")

    def synonymous_codons(self, include_self: bool = False) -> List["Codon"]:
        """Returns list of synonymous codons

        Parameters
        ----------
        include_self
            Include this codon in returned list

        Returns
        -------
        List[Codon]
            The synonymous codons for the current codon.
        """
        aa = self.translate()
        return [Codon(codon_str) for codon_str in aacodons[aa] if include_self or codon_str != self._val]

    @property
    def is_stop_codon(self) -> bool:
        """Whether the codon is a stop codon or not

        Returns
        -------
        bool
            Whether the codon is a stop codon (True) or not (False)
        """
        return self._val in aacodons[STOP]

    @property
    def is_start_codon(self) -> bool:
        """Whether the codon is the canonical AUG start codon"""
        return self._val == "AUG"
