"""
Open modes of a pcap file.

Positions in a pcap file are based on records, not on characters, so the modes
carry their own semantics instead of relying on plain ``open()`` ones.
"""
from enum import Enum


class OpenMode(Enum):
    """
    The six supported modes. Each member carries three facts: whether the file
    must already exist, whether a valid header is expected in it, and whether
    the initial position is the end of the file.
    """

    READ = ('r', 'rb', True, True, False)
    WRITE = ('w', 'wb', False, False, False)
    APPEND = ('a', 'ab', True, True, True)
    READ_UPDATE = ('r+', 'r+b', True, True, False)
    WRITE_READ = ('w+', 'w+b', False, False, False)
    READ_APPEND = ('a+', 'a+b', True, True, True)

    def __init__(self, mode, os_mode, must_exist, has_header, at_end):
        self.mode = mode
        self.os_mode = os_mode
        self.must_exist = must_exist
        self.has_header = has_header
        self.at_end = at_end

    @property
    def appending(self):
        return self.os_mode.startswith('a')

    @classmethod
    def parse(cls, mode):
        """
        Map a mode string such as ``'r'``, ``'a+'`` or ``'wb'`` to a member.
        The binary/text flag is ignored: pcap files are always binary.
        """
        if isinstance(mode, cls):
            return mode
        stripped = mode.replace('b', '').replace('t', '')
        for member in cls:
            if member.mode == stripped:
                return member
        raise ValueError('invalid pcap open mode: %r' % mode)
