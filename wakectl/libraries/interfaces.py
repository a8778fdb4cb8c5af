import logging
import socket
import ipaddress
import psutil
from wakectl.exceptions import InterfaceNotFoundError, InterfaceDownError, NoAddressAvailableError
from wakectl.models.interface import InterfaceModel

__all__ = ['InterfaceResolver']

class InterfaceResolver:
    @classmethod
    def resolve(cls, name: str) -> str:
        """Return the first usable IPv4 address of interface ``name``.

        The address is meant as a local bind address, the port is left to the OS.
        When the interface does not exist, the interfaces that could be used
        instead are logged for the operator.
        """
        addrs = psutil.net_if_addrs()
        stats = psutil.net_if_stats()

        if name not in addrs and name not in stats:
            logging.warning(f"Interface '{name}' not found")
            cls._log_available(addrs, stats)

            raise InterfaceNotFoundError(f"Interface '{name}' not found", name)

        stat = stats.get(name)

        if stat is None or not stat.isup:
            raise InterfaceDownError(f"Interface '{name}' is not up", name)

        ipv4 = cls._first_ipv4(addrs.get(name, []))

        if not ipv4:
            raise NoAddressAvailableError(f"No valid IPv4 address found for interface '{name}'", name)

        logging.debug(f"Resolved interface '{name}' to {ipv4}")

        return ipv4

    @classmethod
    def list_interfaces(cls) -> list[InterfaceModel]:
        return cls._collect(psutil.net_if_addrs(), psutil.net_if_stats())

    @classmethod
    def _collect(cls, addrs: dict, stats: dict) -> list[InterfaceModel]:
        interfaces = []

        for name, snics in addrs.items():
            stat = stats.get(name)

            # skip loopback and interfaces that are not up
            if stat is None or not stat.isup or cls._is_loopback(stat):
                continue

            ipv4 = cls._first_ipv4(snics)

            if not ipv4:
                continue

            interfaces.append(InterfaceModel(name=name, ipv4=ipv4, mac=cls._hardware_address(snics)))

        return interfaces

    @classmethod
    def _log_available(cls, addrs: dict, stats: dict) -> None:
        interfaces = cls._collect(addrs, stats)

        if not interfaces:
            logging.warning('No usable network interfaces available')
            return

        logging.warning('Available network interfaces:')

        for interface in interfaces:
            logging.warning(f'  {interface}')

    @classmethod
    def _first_ipv4(cls, snics: list) -> str:
        for snic in snics:
            if snic.family != socket.AF_INET:
                continue

            try:
                ip = ipaddress.IPv4Address(snic.address)
            except ValueError:
                continue

            if not ip.is_loopback:
                return str(ip)

        return ''

    @classmethod
    def _hardware_address(cls, snics: list) -> str:
        for snic in snics:
            if snic.family == psutil.AF_LINK:
                return snic.address

        return ''

    @classmethod
    def _is_loopback(cls, stat) -> bool:
        flags = getattr(stat, 'flags', '') or ''

        return 'loopback' in flags.split(',')
