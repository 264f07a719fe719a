"""
Functions for handling FASTA files. Builds BioLib sequence objects from FASTA records.

A FASTA record is a ``>`` header line holding the record identifier, followed by one or more lines of sequence.
:func:`read_fasta` reads exactly one record per call and leaves the handle positioned at the start of the next
record, so a multi-record file can be consumed by calling it repeatedly.
"""
import weakref
from dataclasses import dataclass
from typing import TextIO, Iterable, Union, Optional

from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from inscripta.biolib.exc import EmptySequenceFastaError
from inscripta.biolib.io.fasta.exc import FastaFormatError, FastaExportError
from inscripta.biolib.sequence.alphabet import Alphabet
from inscripta.biolib.sequence.sequence import Sequence

HEADER_MARKER = ">"

# header lines read ahead from handles that cannot seek back, keyed by handle
_pending_lines = weakref.WeakKeyDictionary()


@dataclass(frozen=True)
class FastaRecord:
    """A single FASTA record: the identifier from the header line and the concatenated sequence lines."""

    id: str
    sequence: str

    def __len__(self) -> int:
        return len(self.sequence)

    def to_sequence(self, alphabet: Alphabet = Alphabet.DNA, validate_alphabet: bool = True) -> Sequence:
        """Builds a :class:`~biolib.sequence.Sequence` from this record. The record identifier becomes the
        sequence ID.

        Parameters
        ----------
        alphabet
            Alphabet of the sequence data. Defaults to DNA.
        validate_alphabet
            Whether to validate the sequence data against the alphabet.
        """
        return Sequence(self.sequence, alphabet, id=self.id, validate_alphabet=validate_alphabet)

    def to_seqrecord(self) -> SeqRecord:
        """Converts this record to a BioPython SeqRecord"""
        return SeqRecord(Seq(self.sequence), id=self.id, description="")

    def to_fasta(self, num_chars: Optional[int] = 60) -> str:
        """Returns this record as FASTA text, line-broken every num_chars"""
        if not self.sequence:
            raise EmptySequenceFastaError("Cannot write FASTA for empty record {}".format(self.id))

        r = [f">{self.id}"]
        for i in range(0, len(self.sequence), num_chars):
            r.append(self.sequence[i : i + num_chars])
        return "\n".join(r)

    @staticmethod
    def from_sequence(sequence: Sequence) -> "FastaRecord":
        """Builds a FastaRecord from a :class:`~biolib.sequence.Sequence`. A missing ID becomes an empty string."""
        return FastaRecord(id=sequence.id or "", sequence=str(sequence))


def read_fasta(fasta_handle: TextIO) -> FastaRecord:
    """Reads a single FASTA record from an open text handle.

    The header line is read as the identifier. Subsequent lines are concatenated, with line endings removed,
    until the next ``>`` or the end of the stream. The next header is not consumed.

    Seekable handles are rewound to the start of the line that was looked at. Handles that cannot seek, such as
    pipes or standard input, keep that line aside and the next call on the same handle starts from it.

    Args:
        fasta_handle: Open text handle positioned at a ``>``.

    Returns:
        The :class:`FastaRecord` that was read.

    Raises:
        FastaFormatError if the handle is not positioned at a ``>``. The offending line is not consumed.
    """
    start = _tell(fasta_handle)
    header = _readline(fasta_handle)
    if not header.startswith(HEADER_MARKER):
        _unread(fasta_handle, header, start)
        raise FastaFormatError("Not FASTA format: expected '{}' but found {!r}".format(HEADER_MARKER, header[:1]))
    record_id = header[len(HEADER_MARKER) :].rstrip("\r\n")

    lines = []
    while True:
        pos = _tell(fasta_handle)
        line = _readline(fasta_handle)
        if not line:
            break
        if line.startswith(HEADER_MARKER):
            _unread(fasta_handle, line, pos)
            break
        lines.append(line.rstrip("\r\n"))
    return FastaRecord(id=record_id, sequence="".join(lines))


def _tell(fasta_handle: TextIO) -> Optional[int]:
    if not fasta_handle.seekable():
        return None
    return fasta_handle.tell()


def _readline(fasta_handle: TextIO) -> str:
    if fasta_handle in _pending_lines:
        return _pending_lines.pop(fasta_handle)
    return fasta_handle.readline()


def _unread(fasta_handle: TextIO, line: str, pos: Optional[int]):
    if pos is None:
        if line:
            _pending_lines[fasta_handle] = line
    else:
        fasta_handle.seek(pos)


def write_fasta(
    records: Iterable[Union[FastaRecord, Sequence]], fasta_file_handle: TextIO, num_chars: Optional[int] = 60
):
    """
    Write FASTA records or sequences to an open text handle.

    Args:
        records: Iterable of :class:`FastaRecord` or :class:`~biolib.sequence.Sequence` objects.
        fasta_file_handle: Open file handle to write the FASTA to.
        num_chars: Number of sequence characters per line.

    Raises:
        FastaExportError if any record is empty. Records before it have already been written.
    """
    for record in records:
        if len(record) == 0:
            raise FastaExportError("Cannot export FASTA for empty record {}".format(record.id))
        print(record.to_fasta(num_chars), file=fasta_file_handle)
