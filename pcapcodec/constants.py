"""
Constants of the libpcap capture file format.
"""

# PCAP magic numbers, as seen when the header is read in host byte order
PCAP_MAGIC_MICRO = 0xa1b2c3d4  # Microsecond precision
PCAP_MAGIC_NANO = 0xa1b23c4d   # Nanosecond precision
PCAP_MAGIC_MICRO_SWAPPED = 0xd4c3b2a1  # Microsecond, byte-swapped
PCAP_MAGIC_NANO_SWAPPED = 0x4d3cb2a1   # Nanosecond, byte-swapped

VERSION_MAJOR = 2
VERSION_MINOR = 4

SNAPLEN_DEFAULT = 65535  # max octets saved per packet
ZONE_DEFAULT = 0         # UTC

# magic_number, version_major, version_minor, thiszone, sigfigs, snaplen, network
FILE_HEADER_FORMAT = '=IHHiIII'
# ts_sec, ts_usec (or ts_nsec), incl_len, orig_len
RECORD_HEADER_FORMAT = '=IIII'

FILE_HEADER_SIZE = 24
RECORD_HEADER_SIZE = 16

# A few well-known data link types (see pcap-linktype(7))
LINKTYPE_NULL = 0
LINKTYPE_ETHERNET = 1
LINKTYPE_PPP = 9
LINKTYPE_RAW = 101
LINKTYPE_IEEE802_11 = 105
LINKTYPE_LINUX_SLL = 113
LINKTYPE_IEEE802_11_RADIOTAP = 127
LINKTYPE_BLUETOOTH_LE_LL = 251
