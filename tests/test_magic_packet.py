"""Tests for magic packet encoding."""

import pytest

from wakectl.exceptions import InvalidMacFormatError
from wakectl.libraries.magic_packet import MagicPacket, MAGIC_PACKET_SIZE

MAC_BYTES = bytes([0x01, 0x02, 0x03, 0x04, 0x05, 0x06])


class TestEncode:
    @pytest.mark.parametrize("mac", ["01:02:03:04:05:06", "01-02-03-04-05-06"])
    def test_packet_layout(self, mac):
        packet = MagicPacket.encode(mac)

        assert len(packet) == MAGIC_PACKET_SIZE == 102
        assert packet[:6] == b"\xff" * 6
        assert packet[6:] == MAC_BYTES * 16

    def test_hex_digits_are_case_insensitive(self):
        assert MagicPacket.encode("aa:bb:cc:dd:ee:ff") == MagicPacket.encode("AA:BB:CC:DD:EE:FF")
        assert MagicPacket.encode("aA-Bb-cC-Dd-eE-Ff")[6:12] == bytes.fromhex("aabbccddeeff")

    def test_all_ones_mac(self):
        assert MagicPacket.encode("FF:FF:FF:FF:FF:FF") == b"\xff" * 102


class TestRejects:
    @pytest.mark.parametrize(
        "mac",
        [
            "",
            "01:02:03:04:05",
            "01-02-03-04-05",
            "01:02:03:04:05:06:07",
            "01-02-03-04-05-06-07",
            "01:02:03:04:05:GG",
            "01-02-03-04-05-0Z",
            "01:02-03:04-05:06",
            "010203040506",
            "1:2:3:4:5:6",
            "01:02:03:04:05:06\n",
            " 01:02:03:04:05:06",
            "0102.0304.0506",
        ],
    )
    def test_invalid_format(self, mac):
        with pytest.raises(InvalidMacFormatError):
            MagicPacket.encode(mac)

    def test_non_string_input(self):
        with pytest.raises(InvalidMacFormatError):
            MagicPacket.encode(None)

    def test_parse_mac_returns_octets(self):
        assert MagicPacket.parse_mac("01-02-03-04-05-06") == MAC_BYTES
