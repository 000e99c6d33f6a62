class TrackerException(Exception):
    """Base class for hitting tracker exceptions."""


class TrackerConfigError(TrackerException):
    """Raised when configuration values are invalid."""


class RecordFormatError(TrackerException):
    """Raised when an exported record is missing fields or holds unknown values."""
