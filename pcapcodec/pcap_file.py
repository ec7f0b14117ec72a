"""
Create, append to and read libpcap capture files.

A ``PcapFile`` owns one OS file. Its operations do not raise on the failures
listed in ``pcapcodec.errors``: ``open``, ``init`` and ``write`` return None on
success or the error instance, and every operation leaves its outcome in
``PcapFile.error`` so the OS detail (``errno``, ``strerror``) stays available.

Positions are record based. After opening for reading the file points at the
first record, not at the file header.
"""
import errno
import logging
import os

from .constants import (
    FILE_HEADER_SIZE,
    PCAP_MAGIC_MICRO,
    PCAP_MAGIC_NANO,
    RECORD_HEADER_SIZE,
    SNAPLEN_DEFAULT,
    VERSION_MAJOR,
    VERSION_MINOR,
    ZONE_DEFAULT,
)
from .errors import (
    BufferTooSmall,
    HeaderMismatch,
    OpenFailure,
    PcapError,
    TruncatedRecord,
    WriteFailure,
)
from .headers import KNOWN_MAGICS, FileHeader, PcapRecord, RecordHeader
from .modes import OpenMode
from .swap import swap

log = logging.getLogger(__name__)


def read_and_verify_file_header(fp):
    """
    Read the global header from ``fp`` and check it.

    Returns ``(header, swap_mode)`` where ``header`` is in host byte order.
    Raises ``HeaderMismatch`` for a short header, an unknown magic number or
    an unsupported version.
    """
    try:
        buf = fp.read(FILE_HEADER_SIZE)
    except OSError as exc:
        raise HeaderMismatch.from_os_error('cannot read file header', exc)

    if len(buf) < FILE_HEADER_SIZE:
        raise HeaderMismatch('file header too small (%d bytes)' % len(buf))

    header = FileHeader.unpack(buf)
    try:
        swap_mode, _ = KNOWN_MAGICS[header.magic]
    except KeyError:
        raise HeaderMismatch('bad magic number 0x%08x' % header.magic) from None

    if swap_mode:
        header = swap(header)

    if (header.version_major, header.version_minor) != (VERSION_MAJOR, VERSION_MINOR):
        raise HeaderMismatch('unsupported pcap version %d.%d' % (
            header.version_major, header.version_minor))

    return header, swap_mode


def pack_file_header(header, swap_mode=False):
    """Pack ``header`` (host byte order), swapped if requested."""
    # pack unswapped first so out of range values raise struct.error
    buf = header.pack()
    if swap_mode:
        buf = swap(header).pack()
    return buf


def write_file_header(fp, buf):
    fp.write(buf)
    fp.flush()


class PcapFile:
    """
    A pcap capture file.

    Supported modes are 'r', 'w', 'a', 'r+', 'w+' and 'a+'. Unlike ``open()``,
    'a' and 'a+' need an existing file with a valid header, and 'w'/'w+' leave
    the file without a header until ``init()`` is called.
    """

    def __init__(self):
        self.filename = None
        self.mode = None
        self.error = None
        self.eof = False
        self._file = None
        self._header = None
        self._swap_mode = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __repr__(self):
        return '<PcapFile %r mode=%s open=%s>' % (
            self.filename, self.mode.mode if self.mode else None, self.is_open)

    @property
    def is_open(self):
        return self._file is not None

    def open(self, filename, mode):
        """
        Open ``filename`` in ``mode``. An already open file is closed first.
        Returns None on success, an ``OpenFailure`` or ``HeaderMismatch``
        otherwise; a failed open leaves the handle closed.
        """
        self.close()
        self.filename = os.fspath(filename)
        self.mode = None
        self.error = None
        self.eof = False
        self._header = None
        self._swap_mode = False

        try:
            open_mode = OpenMode.parse(mode)
        except ValueError as exc:
            self.error = OpenFailure(str(exc), errno=errno.EINVAL,
                                     strerror=os.strerror(errno.EINVAL))
            return self.error

        try:
            self._open(open_mode)
        except PcapError as exc:
            self.close()
            self._header = None
            self.mode = None
            self._swap_mode = False
            self.error = exc
        return self.error

    def _open(self, open_mode):
        header = swap_mode = None
        if open_mode.appending:
            # append handles either cannot read or would create a missing file
            probe = self._open_os_file('rb')
            with probe:
                header, swap_mode = read_and_verify_file_header(probe)

        self._file = self._open_os_file(open_mode.os_mode)

        if open_mode.has_header and not open_mode.appending:
            header, swap_mode = read_and_verify_file_header(self._file)

        if open_mode.at_end:
            self._file.seek(0, os.SEEK_END)

        if header is not None:
            self._header = header
            self._swap_mode = swap_mode
        self.mode = open_mode

        log.debug('opened %s mode=%s swap=%s', self.filename, open_mode.mode,
                  self._swap_mode)

    def _open_os_file(self, os_mode):
        try:
            return open(self.filename, os_mode)
        except OSError as exc:
            raise OpenFailure.from_os_error('cannot open %s' % self.filename, exc)

    def close(self):
        """Release the OS file. Safe to call any number of times."""
        if self._file is None:
            return
        fp, self._file = self._file, None
        fp.close()
        log.debug('closed %s', self.filename)

    def _check_open(self, error_class):
        if self._file is None:
            raise error_class('pcap file %s is not open' % self.filename,
                              errno=errno.EBADF, strerror=os.strerror(errno.EBADF))

    def init(self, link_type, snap_len=SNAPLEN_DEFAULT, zone=ZONE_DEFAULT,
             swap_mode=False, nanosecond=False):
        """
        Write a fresh file header at the start of the file.

        ``swap_mode`` writes the file in the byte order opposite to the host,
        ``nanosecond`` selects the nanosecond timestamp magic.

        Any existing content of the file is lost. Returns None on success or a
        ``WriteFailure``.
        """
        self.error = None
        try:
            self._init(link_type, snap_len, zone, swap_mode, nanosecond)
        except PcapError as exc:
            self.error = exc
        return self.error

    def _init(self, link_type, snap_len, zone, swap_mode, nanosecond):
        self._check_open(WriteFailure)

        header = FileHeader(
            magic=PCAP_MAGIC_NANO if nanosecond else PCAP_MAGIC_MICRO,
            version_major=VERSION_MAJOR,
            version_minor=VERSION_MINOR,
            zone=zone,
            sig_figs=0,
            snap_len=snap_len,
            link_type=link_type,
        )

        buf = pack_file_header(header, swap_mode)

        try:
            if os.fstat(self._file.fileno()).st_size:
                log.warning('initializing %s discards its existing content',
                            self.filename)
            self._file.seek(0)
            self._file.truncate()
            # the old header is gone from here on
            self._header = None
            write_file_header(self._file, buf)
        except OSError as exc:
            raise WriteFailure.from_os_error(
                'cannot write file header to %s' % self.filename, exc)

        self._header = header
        self._swap_mode = swap_mode
        self.eof = False
        log.debug('initialized %s link_type=%d snap_len=%d swap=%s',
                  self.filename, link_type, snap_len, swap_mode)

    def write(self, ts_sec, ts_usec, data, total_len=None):
        """
        Append one packet record.

        ``total_len`` is the original length of the packet and defaults to
        ``len(data)``. Packets longer than the snapshot length are truncated
        silently; the record keeps ``total_len`` as its original length.
        Returns None on success or a ``WriteFailure``.
        """
        self.error = None
        try:
            self._write(ts_sec, ts_usec, data, total_len)
        except PcapError as exc:
            self.error = exc
        return self.error

    def _write(self, ts_sec, ts_usec, data, total_len):
        self._check_open(WriteFailure)
        if self._header is None:
            raise WriteFailure('%s has no file header, call init() first'
                               % self.filename)

        payload = memoryview(data).cast('B')
        if total_len is None:
            total_len = len(payload)
        incl_len = min(total_len, self._header.snap_len, len(payload))

        record = RecordHeader(ts_sec, ts_usec, incl_len, total_len)
        # pack unswapped first so out of range values raise struct.error
        buf = record.pack()
        if self._swap_mode:
            buf = swap(record).pack()

        try:
            self._file.write(buf)
            self._file.write(payload[:incl_len])
            self._file.flush()
        except OSError as exc:
            raise WriteFailure.from_os_error(
                'cannot write record to %s' % self.filename, exc)

    def read(self, buffer, max_bytes=None):
        """
        Read the next record, copying its payload into ``buffer``.

        At most ``max_bytes`` (default: ``len(buffer)``) bytes are copied; the
        rest of the payload is skipped and ``error`` is set to a non-fatal
        ``BufferTooSmall``. Returns a ``PcapRecord``, or None at the end of the
        file (``eof`` set, ``error`` None) and on failure (``error`` set).
        """
        self.error = None
        try:
            return self._read(buffer, max_bytes)
        except PcapError as exc:
            self.error = exc
            return None

    def _read(self, buffer, max_bytes):
        self._check_open(PcapError)

        view = memoryview(buffer).cast('B')
        if max_bytes is not None:
            view = view[:max_bytes]

        try:
            buf = self._file.read(RECORD_HEADER_SIZE)
            if not buf:
                self.eof = True
                return None
            if len(buf) < RECORD_HEADER_SIZE:
                raise TruncatedRecord('record header cut short: %d of %d bytes'
                                      % (len(buf), RECORD_HEADER_SIZE))

            record = RecordHeader.unpack(buf)
            if self._swap_mode:
                record = swap(record)

            read_len = min(record.incl_len, len(view))
            got = self._file.readinto(view[:read_len])
            remaining = record.incl_len - read_len
            if remaining and got == read_len:
                got += len(self._file.read(remaining))
        except OSError as exc:
            raise PcapError.from_os_error('cannot read %s' % self.filename, exc)

        if got < record.incl_len:
            raise TruncatedRecord('record payload cut short: %d of %d bytes'
                                  % (got, record.incl_len))

        self.eof = False
        if remaining:
            log.warning('buffer too small for record: copied %d of %d bytes',
                        read_len, record.incl_len)
            self.error = BufferTooSmall('copied %d of %d bytes'
                                        % (read_len, record.incl_len))

        return PcapRecord(record.ts_sec, record.ts_usec, record.incl_len,
                          record.orig_len, read_len)

    def records(self, max_bytes=None):
        """
        Iterate over ``(record, payload)`` pairs up to the end of the file.
        Payloads are cut to ``max_bytes``, the snapshot length by default.
        Iteration stops early on a fatal error, which is left in ``error``.
        """
        if max_bytes is None:
            max_bytes = self.snap_len or SNAPLEN_DEFAULT
        buffer = bytearray(max_bytes)
        while True:
            record = self.read(buffer)
            if record is None:
                return
            yield record, bytes(buffer[:record.read_len])

    def _header_field(self, name):
        if self._header is None:
            return None
        return getattr(self._header, name)

    @property
    def header(self):
        """The file header in host byte order, None until read or written."""
        return self._header

    @property
    def swap_mode(self):
        return self._swap_mode

    @property
    def magic(self):
        return self._header_field('magic')

    @property
    def version_major(self):
        return self._header_field('version_major')

    @property
    def version_minor(self):
        return self._header_field('version_minor')

    @property
    def time_zone_offset(self):
        return self._header_field('zone')

    @property
    def sig_figs(self):
        return self._header_field('sig_figs')

    @property
    def snap_len(self):
        return self._header_field('snap_len')

    @property
    def data_link_type(self):
        return self._header_field('link_type')

    @property
    def nanosecond(self):
        """True when timestamps carry nanoseconds instead of microseconds."""
        if self._header is None:
            return None
        return self._header.magic == PCAP_MAGIC_NANO
