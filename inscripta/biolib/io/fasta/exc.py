from inscripta.biolib.io.exc import BioLibIOException


class FastaFormatError(BioLibIOException):
    """
    Raised when a FASTA record does not start with the ``>`` header marker.
    """

    pass


class FastaExportError(BioLibIOException):
    """
    Raised when a FASTA record cannot be written.
    """

    pass
