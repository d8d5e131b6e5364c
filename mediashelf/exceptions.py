# mediashelf/exceptions.py


class MediaShelfError(Exception):
    """Base class for all media-shelf errors"""


class ValidationError(MediaShelfError):
    """Raised when a command is given data the collection must not accept"""


class NotFoundError(MediaShelfError):
    """Raised at the command boundary for an unknown shelf or item id"""


class CodecError(MediaShelfError):
    """Raised when a blob or an exported record cannot be decoded"""


class ImportFormatError(MediaShelfError):
    """Raised when an import payload is not a JSON array"""


class PersistenceError(MediaShelfError):
    """Raised when a snapshot could not be written to storage"""
