"""Exception types raised by ndotter."""


class NdotterError(Exception):
    """Base class for all ndotter failures."""


class ConversionError(NdotterError, ValueError):
    """Invalid conversion settings or misuse of the document builder."""


class ZeroDotSize(ConversionError):
    """Dot size of 0 was requested."""

    def __init__(self, message: str = "Dot size must not be 0"):
        super().__init__(message)


class ImageDecodeError(NdotterError):
    """The source image could not be read or decoded."""


class DocumentWriteError(NdotterError):
    """The finished document could not be written to its destination."""


class PostProcessError(NdotterError):
    """Opening the written document failed. Never fatal."""
