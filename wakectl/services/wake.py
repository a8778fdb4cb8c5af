import logging
import socket
from wakectl.exceptions import AddressResolutionError, SendError, ShortWriteError
from wakectl.libraries.interfaces import InterfaceResolver
from wakectl.libraries.magic_packet import MagicPacket, MAGIC_PACKET_SIZE
from wakectl.models.wake import WakeModel
from wakectl.services.alias import AliasService, AliasFound

__all__ = ['WakeService', 'WakeResult']

class WakeResult:
    def __init__(self, *, mac: str, interface: str, bind_address: str, destination: tuple[str, int], sent: int):
        self.mac: str = mac
        self.interface: str = interface
        self.bind_address: str = bind_address
        self.destination: tuple[str, int] = destination
        self.sent: int = sent

    def __repr__(self):
        return f'WakeResult(mac={self.mac}, interface={self.interface}, bind_address={self.bind_address}, destination={self.destination}, sent={self.sent})'

class WakeService:
    def __init__(self, config: WakeModel, *, aliases: AliasService, logger: logging.Logger):
        self._config: WakeModel = config

        self._aliases: AliasService = aliases
        self._logger: logging.Logger = logger

    @property
    def broadcast_target(self) -> str:
        return f'{self._config.broadcast}:{self._config.port}'

    def wake(self, token: str) -> WakeResult:
        mac, interface = self._resolve_target(token)

        bind_address = ''

        if interface:
            bind_address = InterfaceResolver.resolve(interface)

        destination = self._resolve_destination()
        packet = MagicPacket.encode(mac)

        self._logger.debug(f'Sending magic packet for {mac} to {destination[0]}:{destination[1]} via {bind_address or "default interface"}')

        sent = self._send(packet, bind_address, destination)

        return WakeResult(mac=mac, interface=interface, bind_address=bind_address, destination=destination, sent=sent)

    def _resolve_target(self, token: str) -> tuple[str, str]:
        mac = token
        interface = ''

        lookup = self._aliases.lookup(token)

        if isinstance(lookup, AliasFound):
            mac = lookup.alias.mac
            interface = lookup.alias.iface

        # command line interface always wins over the stored one
        if self._config.interface:
            interface = self._config.interface

        return mac, interface

    def _resolve_destination(self) -> tuple[str, int]:
        port = self._config.port

        if not self._config.broadcast:
            raise AddressResolutionError('Missing broadcast address')

        if isinstance(port, str) and not port.strip():
            raise AddressResolutionError(f'Missing UDP port for {self._config.broadcast}')

        if isinstance(port, str) and port.isdigit():
            port = int(port)

        if isinstance(port, int) and not 0 <= port <= 65535:
            raise AddressResolutionError(f'Invalid UDP port {port} for {self.broadcast_target}')

        try:
            infos = socket.getaddrinfo(self._config.broadcast, port, socket.AF_INET, socket.SOCK_DGRAM)
        except (socket.gaierror, UnicodeError, OverflowError) as e:
            raise AddressResolutionError(f'Failed to resolve {self.broadcast_target}: {e}') from e

        if not infos:
            raise AddressResolutionError(f'Failed to resolve {self.broadcast_target}')

        host, port = infos[0][4][:2]

        return host, port

    def _send(self, packet: bytes, bind_address: str, destination: tuple[str, int]) -> int:
        try:
            with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)

                if bind_address:
                    sock.bind((bind_address, 0))

                sock.connect(destination)
                sent = sock.send(packet)
        except OSError as e:
            raise SendError(f'Failed to send magic packet to {destination[0]}:{destination[1]}: {e}') from e

        if sent != MAGIC_PACKET_SIZE:
            raise ShortWriteError(sent, MAGIC_PACKET_SIZE)

        return sent
