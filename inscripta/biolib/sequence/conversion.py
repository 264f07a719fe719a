"""
Conversions between DNA, RNA and protein :class:`Sequence` objects. Each function returns a new Sequence and never
modifies its input.
"""
import warnings
from typing import Optional

from inscripta.biolib.exc import AlphabetError, InvalidSequenceError, PartialCodonWarning
from inscripta.biolib.gene.codon import Codon
from inscripta.biolib.sequence.alphabet import Alphabet, TRANSCRIPTION_SUBSTITUTIONS
from inscripta.biolib.sequence.sequence import Sequence


def _transcribe(sequence: Sequence, target: Alphabet) -> Sequence:
    if sequence.alphabet == target:
        return Sequence(str(sequence), target, id=sequence.id, validate_alphabet=False)
    try:
        old, new = TRANSCRIPTION_SUBSTITUTIONS[(sequence.alphabet, target)]
    except KeyError:
        raise AlphabetError("Cannot convert sequence with alphabet {} to {}".format(sequence.alphabet, target))
    return Sequence(str(sequence).replace(old, new), target, id=sequence.id, validate_alphabet=False)


def to_rna(dna: Sequence) -> Sequence:
    """Transcribes DNA to RNA by replacing every T with U. Other symbols pass through unchanged."""
    return _transcribe(dna, Alphabet.RNA)


def to_dna(rna: Sequence) -> Sequence:
    """Converts RNA to DNA by replacing every U with T. Other symbols pass through unchanged."""
    return _transcribe(rna, Alphabet.DNA)


def to_protein(mrna: Sequence, new_id: Optional[str] = None) -> Sequence:
    """Translates a messenger RNA into a protein.

    Codons are read from the first position. Translation ends at the first stop codon, which is not included in
    the result, or at the end of the sequence. A trailing incomplete codon reached before any stop is ignored and a
    :class:`~biolib.exc.PartialCodonWarning` is emitted. DNA input is transcribed before translation.

    Parameters
    ----------
    mrna
        RNA (or DNA) sequence to translate.
    new_id
        ID for the returned Sequence. If no value is provided, the ID of ``mrna`` is used.

    Raises
    ------
    InvalidSequenceError
        If ``mrna`` contains symbols outside of its alphabet.
    AlphabetError
        If ``mrna`` is not a nucleotide sequence.
    """
    if not mrna.alphabet.is_nucleotide_alphabet():
        raise AlphabetError("Cannot translate sequence with alphabet {}".format(mrna.alphabet))
    if not mrna.is_valid():
        raise InvalidSequenceError("Cannot translate invalid sequence {}".format(mrna.summary()))
    rna = str(to_rna(mrna))

    remainder = len(rna) % 3
    amino_acids = []
    for i in range(0, len(rna) - remainder, 3):
        codon = Codon(rna[i : i + 3])
        if codon.is_stop_codon:
            break
        amino_acids.append(codon.translate())
    else:
        if remainder:
            warnings.warn(
                PartialCodonWarning(
                    f"Sequence length {len(rna)} is not a multiple of 3; ignoring last {remainder} bases"
                )
            )
    return Sequence(
        "".join(amino_acids),
        Alphabet.PROTEIN,
        id=new_id if new_id is not None else mrna.id,
        validate_alphabet=False,
    )
