"""
Fixed-size pcap structures and their wire layout.

Both structures are packed in host byte order; swapping for files of the other
byte order is applied on top of this (see ``pcapcodec.swap``).
"""
import collections
import struct

from .constants import (
    FILE_HEADER_FORMAT,
    PCAP_MAGIC_MICRO,
    PCAP_MAGIC_MICRO_SWAPPED,
    PCAP_MAGIC_NANO,
    PCAP_MAGIC_NANO_SWAPPED,
    RECORD_HEADER_FORMAT,
)

_FILE_HEADER = struct.Struct(FILE_HEADER_FORMAT)
_RECORD_HEADER = struct.Struct(RECORD_HEADER_FORMAT)

# magic -> (swapped, nanosecond)
KNOWN_MAGICS = {
    PCAP_MAGIC_MICRO: (False, False),
    PCAP_MAGIC_MICRO_SWAPPED: (True, False),
    PCAP_MAGIC_NANO: (False, True),
    PCAP_MAGIC_NANO_SWAPPED: (True, True),
}


class FileHeader(collections.namedtuple('FileHeader', [
        'magic', 'version_major', 'version_minor', 'zone',
        'sig_figs', 'snap_len', 'link_type'])):
    """Global pcap header, 24 bytes."""

    __slots__ = ()

    def pack(self):
        return _FILE_HEADER.pack(*self)

    @classmethod
    def unpack(cls, buf):
        return cls(*_FILE_HEADER.unpack(buf))


class RecordHeader(collections.namedtuple('RecordHeader', [
        'ts_sec', 'ts_usec', 'incl_len', 'orig_len'])):
    """Per-packet record header, 16 bytes."""

    __slots__ = ()

    def pack(self):
        return _RECORD_HEADER.pack(*self)

    @classmethod
    def unpack(cls, buf):
        return cls(*_RECORD_HEADER.unpack(buf))


# What PcapFile.read() hands back for each record
PcapRecord = collections.namedtuple('PcapRecord', [
    'ts_sec', 'ts_usec', 'incl_len', 'orig_len', 'read_len'])
