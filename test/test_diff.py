import shutil

from conftest import BASE_TIME, TEST_PACKETS, write_capture

from pcapcodec import HeaderMismatch, OpenFailure, PcapFile, diff


def make_capture(path, packets, swap_mode=False, snap_len=65535):
    with PcapFile() as pcap:
        pcap.open(path, 'w')
        pcap.init(1, snap_len=snap_len, swap_mode=swap_mode)
        for i, data in enumerate(packets):
            pcap.write(BASE_TIME + i, i * 10, data)
    return path


def test_diff_same_file(test_pcap):
    result = diff(test_pcap, test_pcap)
    assert not result.differs
    assert result.error is None
    assert result.sec is None and result.usec is None


def test_diff_copy(test_pcap, tmp_path):
    copy = tmp_path / 'copy.pcap'
    shutil.copyfile(test_pcap, copy)
    assert not diff(test_pcap, copy).differs


def test_diff_ignores_byte_order(tmp_path):
    native = make_capture(tmp_path / 'native.pcap', TEST_PACKETS)
    swapped = make_capture(tmp_path / 'swapped.pcap', TEST_PACKETS, swap_mode=True)
    assert native.read_bytes() != swapped.read_bytes()
    assert not diff(native, swapped).differs


def test_diff_payload_byte(tmp_path):
    changed = list(TEST_PACKETS)
    changed[2] = changed[2][:-1] + b'?'
    first = make_capture(tmp_path / 'a.pcap', TEST_PACKETS)
    second = make_capture(tmp_path / 'b.pcap', changed)

    result = diff(first, second)
    assert result.differs
    assert (result.sec, result.usec) == (BASE_TIME + 2, 20)
    assert result.error is None


def test_diff_extra_record(tmp_path):
    first = make_capture(tmp_path / 'a.pcap', TEST_PACKETS)
    second = make_capture(tmp_path / 'b.pcap', TEST_PACKETS[:3])

    result = diff(first, second)
    assert result.differs
    assert result.sec == BASE_TIME + 3

    assert diff(second, first).differs


def test_diff_original_length(tmp_path):
    first = make_capture(tmp_path / 'a.pcap', [b'x' * 100], snap_len=50)
    second = make_capture(tmp_path / 'b.pcap', [b'x' * 50], snap_len=50)
    assert diff(first, second).differs


def test_diff_timestamp(tmp_path):
    packets = [(data, 0) for data in TEST_PACKETS]
    first = write_capture(tmp_path / 'a.pcap', 0xa1b2c3d4, packets)
    second = write_capture(tmp_path / 'b.pcap', 0xa1b2c3d4, packets[:1] + [(TEST_PACKETS[1], 5)])
    result = diff(first, second)
    assert result.differs
    assert (result.sec, result.usec) == (BASE_TIME + 1, 0)


def test_diff_only_compares_snap_len(tmp_path):
    first = make_capture(tmp_path / 'a.pcap', [b'same-prefix-A'])
    second = make_capture(tmp_path / 'b.pcap', [b'same-prefix-B'])
    assert not diff(first, second, snap_len=11).differs
    assert diff(first, second).differs


def test_diff_missing_file(test_pcap, tmp_path):
    result = diff(test_pcap, tmp_path / 'missing.pcap')
    assert result.differs
    assert isinstance(result.error, OpenFailure)


def test_diff_bad_header(test_pcap, tmp_path):
    junk = tmp_path / 'junk.pcap'
    junk.write_bytes(b'not a capture file at all')
    result = diff(junk, test_pcap)
    assert isinstance(result.error, HeaderMismatch)
