"""
The :class:`Sequence` class defines a sequence with an :class:`Alphabet`. DNA, RNA and protein are all represented
by :class:`Sequence`; the alphabet tag says which one a given instance is. Conversions between them live in
:mod:`~biolib.sequence.conversion`.
"""

from inscripta.biolib.sequence.alphabet import Alphabet  # noqa: F401
from inscripta.biolib.sequence.sequence import Sequence, NucleotideCount  # noqa: F401
from inscripta.biolib.sequence.conversion import to_dna, to_rna, to_protein  # noqa: F401
