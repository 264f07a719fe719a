"""
Constant lookup tables. The standard genetic code is expressed over RNA codons, with ``*`` marking a stop.
"""
from collections import defaultdict
from types import MappingProxyType

STOP = "*"

# fmt: off
gencode = MappingProxyType(
    {
        "UUU": "F", "CUU": "L", "AUU": "I", "GUU": "V",
        "UUC": "F", "CUC": "L", "AUC": "I", "GUC": "V",
        "UUA": "L", "CUA": "L", "AUA": "I", "GUA": "V",
        "UUG": "L", "CUG": "L", "AUG": "M", "GUG": "V",
        "UCU": "S", "CCU": "P", "ACU": "T", "GCU": "A",
        "UCC": "S", "CCC": "P", "ACC": "T", "GCC": "A",
        "UCA": "S", "CCA": "P", "ACA": "T", "GCA": "A",
        "UCG": "S", "CCG": "P", "ACG": "T", "GCG": "A",
        "UAU": "Y", "CAU": "H", "AAU": "N", "GAU": "D",
        "UAC": "Y", "CAC": "H", "AAC": "N", "GAC": "D",
        "UAA": STOP, "CAA": "Q", "AAA": "K", "GAA": "E",
        "UAG": STOP, "CAG": "Q", "AAG": "K", "GAG": "E",
        "UGU": "C", "CGU": "R", "AGU": "S", "GGU": "G",
        "UGC": "C", "CGC": "R", "AGC": "S", "GGC": "G",
        "UGA": STOP, "CGA": "R", "AGA": "R", "GGA": "G",
        "UGG": "W", "CGG": "R", "AGG": "R", "GGG": "G",
    }
)
# fmt: on


def _invert(table):
    inverted = defaultdict(list)
    for codon, aa in table.items():
        inverted[aa].append(codon)
    return MappingProxyType({aa: tuple(sorted(codons)) for aa, codons in inverted.items()})


aacodons = _invert(gencode)
