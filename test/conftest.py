import struct
import sys

import pytest

# Format strings in the byte order opposite to this host
SWAPPED = '>' if sys.byteorder == 'little' else '<'

TEST_PACKETS = [
    b"Hello, this is packet 1!",
    b"Second packet with more data...",
    b"Third packet",
    b"Final packet with some binary data \x00\x01\x02\x03",
]

NANO_PACKETS = [
    (b"Nanosecond packet 1", 123456789),
    (b"Nanosecond packet 2 with more data", 987654321),
    (b"Short", 111111111),
    (b"Final nanosecond packet with binary \x00\x01\x02", 999999999),
]

BASE_TIME = 1700000000


def write_capture(path, magic, packets, byte_order='=', snaplen=65535, network=1,
                  thiszone=0):
    """
    Pack a capture by hand: ``packets`` is a list of (data, ts_subsec).
    """
    with open(path, 'wb') as f:
        # magic_number, version_major, version_minor, thiszone, sigfigs, snaplen, network
        f.write(struct.pack(byte_order + 'IHHiIII',
                            magic, 2, 4, thiszone, 0, snaplen, network))
        for i, (packet_data, subsec) in enumerate(packets):
            # ts_sec, ts_usec, caplen, len
            f.write(struct.pack(byte_order + 'IIII',
                                BASE_TIME + i, subsec,
                                len(packet_data), len(packet_data)))
            f.write(packet_data)
    return path


@pytest.fixture
def test_pcap(tmp_path):
    packets = [(data, (i + 1) * 1000) for i, data in enumerate(TEST_PACKETS)]
    return write_capture(tmp_path / 'test.pcap', 0xa1b2c3d4, packets)


@pytest.fixture
def swapped_pcap(tmp_path):
    packets = [(data, (i + 1) * 1000) for i, data in enumerate(TEST_PACKETS)]
    return write_capture(tmp_path / 'swapped.pcap', 0xa1b2c3d4, packets,
                         byte_order=SWAPPED, network=101, thiszone=-3600)


@pytest.fixture
def nano_pcap(tmp_path):
    return write_capture(tmp_path / 'test_nano.pcap', 0xa1b23c4d, NANO_PACKETS)


@pytest.fixture
def swapped_nano_pcap(tmp_path):
    return write_capture(tmp_path / 'swapped_nano.pcap', 0xa1b23c4d, NANO_PACKETS,
                         byte_order=SWAPPED)
