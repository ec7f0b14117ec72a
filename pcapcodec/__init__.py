"""
Reader, writer and comparator for libpcap capture files.
"""
from .constants import SNAPLEN_DEFAULT, ZONE_DEFAULT
from .diff import DiffResult, diff
from .errors import (
    BufferTooSmall,
    HeaderMismatch,
    OpenFailure,
    PcapError,
    TruncatedRecord,
    WriteFailure,
)
from .headers import FileHeader, PcapRecord, RecordHeader
from .modes import OpenMode
from .pcap_file import PcapFile

__version__ = '0.1.0'

__all__ = [
    'BufferTooSmall',
    'DiffResult',
    'FileHeader',
    'HeaderMismatch',
    'OpenFailure',
    'OpenMode',
    'PcapError',
    'PcapFile',
    'PcapRecord',
    'RecordHeader',
    'SNAPLEN_DEFAULT',
    'TruncatedRecord',
    'WriteFailure',
    'ZONE_DEFAULT',
    'diff',
]
