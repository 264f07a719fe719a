"""
Codons and translation of RNA codons to amino acids.
"""

from inscripta.biolib.gene.codon import Codon  # noqa F401
