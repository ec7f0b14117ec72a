"""
Error kinds reported by the pcap codec.

Codec operations never raise these: they are returned to the caller and kept
on the handle as ``PcapFile.error``.
"""


class PcapError(Exception):
    """Base class for all pcap codec errors."""

    def __init__(self, message, errno=None, strerror=None):
        super().__init__(message)
        self.errno = errno
        self.strerror = strerror

    @classmethod
    def from_os_error(cls, message, exc):
        """Build an error that keeps the OS detail of ``exc``."""
        return cls('%s: %s' % (message, exc.strerror or exc),
                   errno=exc.errno, strerror=exc.strerror)


class OpenFailure(PcapError):
    """The file could not be created, found or accessed in the given mode."""


class HeaderMismatch(PcapError):
    """The file header is missing, has an unknown magic or an unexpected version."""


class TruncatedRecord(PcapError):
    """Fewer bytes remain in the file than a record header declares."""


class BufferTooSmall(PcapError):
    """Non-fatal: the caller's buffer could not hold the whole record payload."""


class WriteFailure(PcapError):
    """Writing the header or a record failed."""
