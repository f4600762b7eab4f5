# -*- coding: utf-8 -*-

import json

import pytest
from ieparser import helpers, manager
from scapy.all import wrpcap

from conftest import BSSID, HT_CAP_40MHZ_MCS0, build_frame, ie


@pytest.fixture
def parser():
    return helpers.setup_parser()


def run(parser, args):
    manager.start(parser.parse_args(["--config", "fake.ini"] + args))


class TestManager:
    def test_pytest_exit(self, parser):
        with pytest.raises(SystemExit) as pytest_wrapped_exit:
            run(parser, ["--pytest"])
        assert str(pytest_wrapped_exit.value) == "pytest"

    def test_nothing_to_decode(self, parser):
        with pytest.raises(SystemExit) as pytest_wrapped_exit:
            run(parser, [])
        assert pytest_wrapped_exit.value.code == -1

    def test_hex(self, parser, capsys, vht_buffer):
        run(parser, ["--hex", vht_buffer.hex()])
        out = capsys.readouterr().out
        assert "Primary channel      36" in out
        assert "Channel width        Eighty" in out

    def test_hex_ht_mode(self, parser, capsys, vht_buffer):
        run(parser, ["--mode", "ht", "--hex", vht_buffer.hex()])
        out = capsys.readouterr().out
        assert "Primary channel      36" in out
        assert "Channel width" not in out

    def test_hex_json(self, parser, capsys):
        run(parser, ["--logging", "warning", "--json", "--hex", ie(45, HT_CAP_40MHZ_MCS0).hex()])
        data = json.loads(capsys.readouterr().out)
        assert data["features"]["ht_40_mhz"] == 1
        assert data["features"]["ht_rates"] == [13.0]

    def test_hex_decode_failure(self, parser, capsys):
        run(parser, ["--hex", "c0 05 07 00 00 00 00 2d 08 00 00 00 00 00 00 00 00"])
        out = capsys.readouterr().out
        assert "could not decode information elements" in out
        assert "Primary channel" not in out

    def test_read_pcap(self, parser, capsys, beacon, tmp_path):
        pcap = str(tmp_path / "beacons.pcap")
        legacy = build_frame([(0, b"legacy"), (1, bytes([0x82, 0x84]))], bssid="00:11:22:33:44:77")
        wrpcap(pcap, [beacon, legacy, beacon])
        run(parser, ["--read", pcap])
        out = capsys.readouterr().out
        assert out.count(f" - BSSID: {BSSID}") == 1
        assert "00:11:22:33:44:77" not in out
        assert " - SSID: WLAN Pi" in out

    def test_read_pcap_writes_reports(self, parser, beacon, tmp_path):
        pcap = str(tmp_path / "beacons.pcap")
        files_path = tmp_path / "reports"
        wrpcap(pcap, [beacon])
        run(parser, ["--read", pcap, "--files_path", str(files_path)])
        with open(str(files_path / "00-11-22-33-44-55.json")) as _file:
            data = json.load(_file)
        assert data["ssid"] == "WLAN Pi"

    def test_read_missing_pcap(self, parser):
        with pytest.raises(SystemExit) as pytest_wrapped_exit:
            run(parser, ["--read", "fake_file_does_not_exist.pcap"])
        assert pytest_wrapped_exit.value.code == -1

    def test_read_not_a_pcap(self, parser, tmp_path):
        not_pcap = tmp_path / "notes.txt"
        not_pcap.write_text("this is not a capture file")
        with pytest.raises(SystemExit) as pytest_wrapped_exit:
            run(parser, ["--read", str(not_pcap)])
        assert pytest_wrapped_exit.value.code == -1
