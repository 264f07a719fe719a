"""
I/O exceptions.
"""
from inscripta.biolib.exc import BioLibException


class BioLibIOException(BioLibException):
    pass
