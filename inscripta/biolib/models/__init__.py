"""
Data models. These models allow for validation of inputs to a BioLib model.
"""

from inscripta.biolib.models.models import SequenceModel, FastaRecordModel  # noqa: F401
