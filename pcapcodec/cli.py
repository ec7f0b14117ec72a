"""
Command line entry point: generate, inspect and compare pcap files.
"""
import argparse
import logging
import sys
from pathlib import Path

from .constants import SNAPLEN_DEFAULT
from .diff import diff
from .errors import PcapError
from .generate import generate_custom_pcap, generate_large_pcap, generate_simple_pcap
from .pcap_file import PcapFile


def cmd_generate(args):
    # Create output directory if needed
    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if args.type == 'simple':
        count = generate_simple_pcap(args.output, precision=args.precision,
                                     swapped=args.swapped)
        print(f"Created {args.precision}second-precision PCAP: {args.output}")
    elif args.type == 'large':
        count = generate_large_pcap(args.output,
                                    num_packets=args.packets,
                                    min_size=args.min_size,
                                    max_size=args.max_size,
                                    swapped=args.swapped)
        file_size = output_path.stat().st_size / (1024 * 1024)
        print(f"Created large PCAP: {args.output}")
        print(f"  Size range: {args.min_size}-{args.max_size} bytes")
        print(f"  File size: {file_size:.2f} MB")
    else:
        if not args.data:
            print("Error: --data required for custom type", file=sys.stderr)
            return 1
        count = generate_custom_pcap(args.output, args.data,
                                     precision=args.precision, swapped=args.swapped)
        print(f"Created custom PCAP: {args.output}")

    print(f"  Packets: {count:,}")
    return 0


def cmd_info(args):
    with PcapFile() as pcap:
        error = pcap.open(args.file, 'r')
        if error:
            print(f"Error: {error}", file=sys.stderr)
            return 2

        count = sum(1 for _ in pcap.records())

        print(f"Magic Number: {hex(pcap.magic)}")
        print(f"Byte Order: {'swapped' if pcap.swap_mode else 'native'}")
        print(f"Precision: {'nanosecond' if pcap.nanosecond else 'microsecond'}")
        print(f"Version: {pcap.version_major}.{pcap.version_minor}")
        print(f"Timezone Offset: {pcap.time_zone_offset}")
        print(f"Timestamp Accuracy: {pcap.sig_figs}")
        print(f"Snapshot Length: {pcap.snap_len}")
        print(f"Link Layer Type: {pcap.data_link_type}")
        print(f"Packets: {count}")

        if pcap.error:
            print(f"Error: {pcap.error}", file=sys.stderr)
            return 2
    return 0


def cmd_diff(args):
    result = diff(args.file1, args.file2, snap_len=args.snaplen)
    if result.error:
        print(f"Error: {result.error}", file=sys.stderr)
        return 2
    if result.differs:
        print(f"Files differ at packet with timestamp {result.sec}.{result.usec:06d}")
        return 1
    print("Files are identical")
    return 0


def build_parser():
    parser = argparse.ArgumentParser(prog='pcapcodec',
                                     description='Generate, inspect and compare PCAP files')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    gen = subparsers.add_parser('generate', help='Generate PCAP files for testing')
    gen.add_argument('output', help='Output PCAP filename')
    gen.add_argument('--type', choices=['simple', 'large', 'custom'],
                     default='simple', help='Type of PCAP to generate')
    gen.add_argument('--precision', choices=['micro', 'nano'],
                     default='micro', help='Timestamp precision')
    gen.add_argument('--packets', type=int, default=10000,
                     help='Number of packets (for large type)')
    gen.add_argument('--min-size', type=int, default=64,
                     help='Minimum packet size (for large type)')
    gen.add_argument('--max-size', type=int, default=1500,
                     help='Maximum packet size (for large type)')
    gen.add_argument('--data', nargs='+',
                     help='Custom packet data (for custom type)')
    gen.add_argument('--swapped', action='store_true',
                     help='Write in the byte order opposite to this host')
    gen.set_defaults(func=cmd_generate)

    info = subparsers.add_parser('info', help='Show the header of a PCAP file')
    info.add_argument('file', help='PCAP file')
    info.set_defaults(func=cmd_info)

    cmp_ = subparsers.add_parser('diff', help='Compare two PCAP files packet by packet')
    cmp_.add_argument('file1', help='First PCAP file')
    cmp_.add_argument('file2', help='Second PCAP file')
    cmp_.add_argument('--snaplen', type=int, default=SNAPLEN_DEFAULT,
                      help='Maximum payload bytes compared per packet')
    cmp_.set_defaults(func=cmd_diff)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        format='[%(levelname)s] %(message)s',
        level=logging.DEBUG if args.verbose else logging.INFO,
    )

    try:
        return args.func(args)
    except PcapError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())
