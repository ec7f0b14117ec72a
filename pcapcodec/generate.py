"""
PCAP file generator for testing pcap readers.

Supports creating PCAP files with:
- Microsecond or nanosecond precision
- Custom packet data
- Large files with random data
- Native or byte-swapped format
"""
import random
import time

from .constants import LINKTYPE_ETHERNET, SNAPLEN_DEFAULT
from .pcap_file import PcapFile

SIMPLE_PACKETS_MICRO = [
    (b"Hello, this is packet 1!", 100000),
    (b"Second packet with more data...", 200000),
    (b"Third packet", 300000),
    (b"Final packet with some binary data \x00\x01\x02\x03", 400000),
]

SIMPLE_PACKETS_NANO = [
    (b"Nanosecond packet 1", 123456789),
    (b"Nanosecond packet 2 with more data", 987654321),
    (b"Short", 111111111),
    (b"Final nanosecond packet with binary \x00\x01\x02", 999999999),
]


def _create(filename, precision='micro', snaplen=SNAPLEN_DEFAULT,
            network=LINKTYPE_ETHERNET, swapped=False):
    """Open ``filename`` for writing and write its global header."""
    pcap = PcapFile()
    error = pcap.open(filename, 'w') or pcap.init(
        network, snap_len=snaplen, swap_mode=swapped,
        nanosecond=(precision == 'nano'))
    if error:
        pcap.close()
        raise error
    return pcap


def _write(pcap, ts_sec, ts_subsec, data):
    error = pcap.write(ts_sec, ts_subsec, data)
    if error:
        raise error


def generate_simple_pcap(filename, precision='micro', swapped=False, base_time=None):
    """Generate a simple test PCAP with predefined packets."""
    packets = SIMPLE_PACKETS_NANO if precision == 'nano' else SIMPLE_PACKETS_MICRO
    if base_time is None:
        base_time = int(time.time())

    with _create(filename, precision=precision, swapped=swapped) as pcap:
        for i, (data, subsec) in enumerate(packets):
            _write(pcap, base_time + i, subsec, data)

    return len(packets)


def generate_large_pcap(filename, num_packets=10000, min_size=64, max_size=1500,
                        swapped=False, base_time=None):
    """Generate a large PCAP file with random packets."""
    if base_time is None:
        base_time = int(time.time())

    with _create(filename, snaplen=max_size, swapped=swapped) as pcap:
        for i in range(num_packets):
            # Generate random packet
            packet_size = random.randint(min_size, max_size)
            packet_data = bytes([random.randint(0, 255) for _ in range(packet_size)])

            # Timestamp: increment seconds every 1000 packets
            ts_sec = base_time + (i // 1000)
            ts_usec = (i % 1000) * 1000  # Spread microseconds

            _write(pcap, ts_sec, ts_usec, packet_data)

    return num_packets


def generate_custom_pcap(filename, packets, precision='micro', swapped=False,
                         base_time=None):
    """Generate a PCAP with custom packet data."""
    if base_time is None:
        base_time = int(time.time())

    with _create(filename, precision=precision, swapped=swapped) as pcap:
        for i, packet_data in enumerate(packets):
            if isinstance(packet_data, str):
                packet_data = packet_data.encode('utf-8')

            # Generate subsecond timestamp
            if precision == 'nano':
                ts_subsec = random.randint(0, 999999999)
            else:
                ts_subsec = random.randint(0, 999999)

            _write(pcap, base_time + i, ts_subsec, packet_data)

    return len(packets)
