"""
Data models. These models act as a JSON schema for serializing and deserializing sequences and FASTA records.
"""
from typing import ClassVar, Type, Optional

from marshmallow import Schema
from marshmallow_dataclass import dataclass

from inscripta.biolib.io.fasta.fasta import FastaRecord
from inscripta.biolib.sequence.alphabet import Alphabet
from inscripta.biolib.sequence.sequence import Sequence


@dataclass
class BaseModel:
    """Base for all of the models."""

    Schema: ClassVar[Type[Schema]] = Schema  # noqa: F811

    class Meta:
        ordered = True


@dataclass
class SequenceModel(BaseModel):
    """Data model that allows construction of a :class:`~biolib.sequence.Sequence` object."""

    sequence: str
    alphabet: Alphabet
    id: Optional[str] = None

    def to_sequence(self, validate_alphabet: bool = True) -> Sequence:
        """Construct a :class:`~biolib.sequence.Sequence` from this model."""
        return Sequence(self.sequence, self.alphabet, id=self.id, validate_alphabet=validate_alphabet)

    @staticmethod
    def from_sequence(sequence: Sequence) -> "SequenceModel":
        """Convert to a :class:`~biolib.models.SequenceModel`"""
        return SequenceModel.Schema().load(sequence.to_dict())


@dataclass
class FastaRecordModel(BaseModel):
    """Data model that allows construction of a :class:`~biolib.io.fasta.fasta.FastaRecord` object."""

    id: str
    sequence: str

    def to_fasta_record(self) -> FastaRecord:
        return FastaRecord(id=self.id, sequence=self.sequence)

    @staticmethod
    def from_fasta_record(record: FastaRecord) -> "FastaRecordModel":
        return FastaRecordModel.Schema().load(dict(id=record.id, sequence=record.sequence))
