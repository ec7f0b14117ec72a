"""
Byte order transforms.

Scalars are handled per width, structures field by field. Every function
returns a new value and never touches its argument.
"""
from functools import singledispatch

from .headers import FileHeader, RecordHeader


def swap8(val):
    """8-bit values have no byte order."""
    return val & 0xff


def swap16(val):
    return ((val & 0x00ff) << 8) | ((val & 0xff00) >> 8)


def swap32(val):
    return (((val & 0x000000ff) << 24) |
            ((val & 0x0000ff00) << 8) |
            ((val & 0x00ff0000) >> 8) |
            ((val & 0xff000000) >> 24))


def swap_int32(val):
    """Swap a signed 32-bit value through its two's complement form."""
    swapped = swap32(val & 0xffffffff)
    if swapped & 0x80000000:
        swapped -= 0x100000000
    return swapped


_SCALAR_SWAPS = {
    8: swap8,
    16: swap16,
    32: swap32,
}


def swap_scalar(val, width):
    """Swap an unsigned scalar of ``width`` bits (8, 16 or 32)."""
    try:
        transform = _SCALAR_SWAPS[width]
    except KeyError:
        raise ValueError('unsupported width: %r' % width) from None
    return transform(val)


@singledispatch
def swap(structure):
    """Return a byte-swapped copy of a pcap file or record header."""
    raise TypeError('cannot swap %s' % type(structure).__name__)


@swap.register(FileHeader)
def swap_file_header(header):
    return FileHeader(
        magic=swap32(header.magic),
        version_major=swap16(header.version_major),
        version_minor=swap16(header.version_minor),
        zone=swap_int32(header.zone),
        sig_figs=swap32(header.sig_figs),
        snap_len=swap32(header.snap_len),
        link_type=swap32(header.link_type),
    )


@swap.register(RecordHeader)
def swap_record_header(header):
    return RecordHeader(
        ts_sec=swap32(header.ts_sec),
        ts_usec=swap32(header.ts_usec),
        incl_len=swap32(header.incl_len),
        orig_len=swap32(header.orig_len),
    )
