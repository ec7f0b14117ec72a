from conftest import BASE_TIME

from pcapcodec.cli import main


def test_generate_and_info(tmp_path, capsys):
    output = tmp_path / 'data' / 'test.pcap'
    assert main(['generate', str(output), '--precision', 'nano', '--swapped']) == 0
    assert output.exists()

    assert main(['info', str(output)]) == 0
    out = capsys.readouterr().out
    assert 'Magic Number: 0xa1b23c4d' in out
    assert 'Byte Order: swapped' in out
    assert 'Precision: nanosecond' in out
    assert 'Packets: 4' in out


def test_generate_custom_requires_data(tmp_path, capsys):
    assert main(['generate', str(tmp_path / 'c.pcap'), '--type', 'custom']) == 1
    assert '--data required' in capsys.readouterr().err


def test_info_bad_file(tmp_path, capsys):
    path = tmp_path / 'bad.pcap'
    path.write_bytes(b'\x00' * 24)
    assert main(['info', str(path)]) == 2
    assert 'bad magic number' in capsys.readouterr().err


def test_diff(test_pcap, tmp_path, capsys):
    assert main(['diff', str(test_pcap), str(test_pcap)]) == 0
    assert 'identical' in capsys.readouterr().out

    other = tmp_path / 'other.pcap'
    assert main(['generate', str(other), '--type', 'custom', '--data', 'x']) == 0
    capsys.readouterr()

    assert main(['-v', 'diff', str(test_pcap), str(other)]) == 1
    assert f"timestamp {BASE_TIME}.001000" in capsys.readouterr().out

    assert main(['diff', str(test_pcap), str(tmp_path / 'missing.pcap')]) == 2
