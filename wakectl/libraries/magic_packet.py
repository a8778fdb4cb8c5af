import re
from wakeonlan import create_magic_packet
from wakectl.exceptions import InvalidMacFormatError

__all__ = ['MagicPacket', 'MAGIC_PACKET_SIZE']

MAGIC_PACKET_SIZE = 102

# six hex pairs sharing a single ':' or '-' separator
_MAC_RE = re.compile(r'[0-9a-fA-F]{2}([:-])(?:[0-9a-fA-F]{2}\1){4}[0-9a-fA-F]{2}')

class MagicPacket:
    @classmethod
    def parse_mac(cls, mac: str) -> bytes:
        if not isinstance(mac, str) or not _MAC_RE.fullmatch(mac):
            raise InvalidMacFormatError(f'Invalid MAC address format: "{mac}"')

        return bytes.fromhex(re.sub(r'[:-]', '', mac))

    @classmethod
    def encode(cls, mac: str) -> bytes:
        octets = cls.parse_mac(mac)

        return create_magic_packet(octets.hex())
