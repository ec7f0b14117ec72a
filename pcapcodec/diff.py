"""
Packet by packet comparison of two pcap files.
"""
import collections
import logging

from .constants import SNAPLEN_DEFAULT
from .errors import BufferTooSmall
from .pcap_file import PcapFile

log = logging.getLogger(__name__)

# sec/usec: timestamp of the first differing record, None when the files match
DiffResult = collections.namedtuple('DiffResult', ['differs', 'sec', 'usec', 'error'])


def _fatal(error):
    if isinstance(error, BufferTooSmall):
        return None
    return error


def _records_differ(rec1, data1, rec2, data2):
    if (rec1.ts_sec, rec1.ts_usec) != (rec2.ts_sec, rec2.ts_usec):
        return True
    if (rec1.incl_len, rec1.orig_len, rec1.read_len) != \
            (rec2.incl_len, rec2.orig_len, rec2.read_len):
        return True
    return data1[:rec1.read_len] != data2[:rec2.read_len]


def diff(file1, file2, snap_len=SNAPLEN_DEFAULT):
    """
    Compare two pcap files record by record, stopping at the first
    difference. At most ``snap_len`` payload bytes of each record are
    compared.

    Returns a ``DiffResult``. When a file cannot be opened or a record is
    truncated, ``differs`` is True and ``error`` holds the failure.
    """
    with PcapFile() as pcap1, PcapFile() as pcap2:
        error = pcap1.open(file1, 'r') or pcap2.open(file2, 'r')
        if error:
            return DiffResult(True, None, None, error)

        data1 = bytearray(snap_len)
        data2 = bytearray(snap_len)
        index = 0
        while True:
            rec1 = pcap1.read(data1)
            rec2 = pcap2.read(data2)

            error = _fatal(pcap1.error) or _fatal(pcap2.error)
            if error:
                return DiffResult(True, None, None, error)

            if rec1 is None and rec2 is None:
                log.debug('%s and %s are identical (%d records)', file1, file2, index)
                return DiffResult(False, None, None, None)

            if rec1 is None or rec2 is None:
                extra = rec1 or rec2
                log.debug('record count differs after %d records', index)
                return DiffResult(True, extra.ts_sec, extra.ts_usec, None)

            if _records_differ(rec1, data1, rec2, data2):
                log.debug('record %d differs', index)
                return DiffResult(True, rec1.ts_sec, rec1.ts_usec, None)

            index += 1
