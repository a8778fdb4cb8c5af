import sys
import argparse
from pydantic import ValidationError
from wakectl.manager import WakeCtlManager
from wakectl.exceptions import WakeCtlError
from wakectl.models.store import StoreModel
from wakectl.models.wake import WakeModel
from wakectl.info import __app_name__, __package_name__, __version__, __description__

COMMANDS = ('alias', 'list', 'remove', 'wake', 'interfaces')

# global options which consume the following argument
VALUE_OPTIONS = ('-d', '--db-dir', '-a', '--db-name', '--log', '--log-level', '-i', '--interface', '-b', '--bcast', '-p', '--port')

def main(argv: list[str] | None = None):
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()

    if not argv:
        parser.print_help()
        sys.exit(0)

    args = parser.parse_args(inject_default_command(argv))

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        store_args = {}

        if args.db_dir:
            store_args['db_dir'] = args.db_dir

        if args.db_name:
            store_args['db_name'] = args.db_name

        store = StoreModel(**store_args)
        wake_config = None

        if args.command == 'wake':
            wake_config = WakeModel(interface=args.interface, broadcast=args.bcast, port=args.port)
    except ValidationError as e:
        print(f"Command line contains {e.error_count()} error(s):")

        for error in e.errors(include_url=False):
            loc = '.'.join(str(x) for x in error['loc']) if error['loc'] else 'general'
            print(f"  - {loc}: {error['msg']}")

        sys.exit(2)

    try:
        with WakeCtlManager(log_file=args.log_file, log_level=args.log_level, store=store) as wakectl:
            run_command(wakectl, args, wake_config)
    except WakeCtlError as e:
        print(f"Fatal error: {e}")
        sys.exit(1)

    sys.exit(0)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=__package_name__, description=__description__)

    parser.add_argument('-d', '--db-dir', dest='db_dir', default='', help='Directory holding the alias store')
    parser.add_argument('-a', '--db-name', dest='db_name', default='', help='File name of the alias store')
    parser.add_argument('--log', dest='log_file', default='', help='Log file where to write logs')
    parser.add_argument('--log-level', dest='log_level', default='', help='Log level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    parser.add_argument('-v', '--version', action='version', version=f'{__app_name__} {__version__}')
    add_wake_options(parser, defaults=True)

    subparsers = parser.add_subparsers(title="Commands", dest="command")

    wake_parser = subparsers.add_parser('wake', help='Send a magic packet to an alias or a MAC address')
    wake_parser.add_argument('token', help='Alias name or MAC address')
    add_wake_options(wake_parser, defaults=False)

    alias_parser = subparsers.add_parser('alias', help='Store an alias for a MAC address')
    alias_parser.add_argument('name', help='Alias name')
    alias_parser.add_argument('mac', help='MAC address')
    alias_parser.add_argument('iface', nargs='?', default='', help='Network interface to use for this alias')

    subparsers.add_parser('list', help='List all stored aliases')

    remove_parser = subparsers.add_parser('remove', help='Remove a stored alias')
    remove_parser.add_argument('name', help='Alias name')

    subparsers.add_parser('interfaces', help='List the network interfaces usable for sending')

    return parser

def add_wake_options(parser: argparse.ArgumentParser, *, defaults: bool) -> None:
    """Register the wake flags, which may appear before or after the wake target.

    Only the top level parser carries defaults, the wake subparser must not
    overwrite values given ahead of the command.
    """
    def default(value: str) -> str:
        return value if defaults else argparse.SUPPRESS

    parser.add_argument('-i', '--interface', dest='interface', default=default(''), help='Network interface to send the packet from')
    parser.add_argument('-b', '--bcast', dest='bcast', default=default('255.255.255.255'), help='Broadcast IP address')
    parser.add_argument('-p', '--port', dest='port', default=default('9'), help='UDP port')

def inject_default_command(argv: list[str]) -> list[str]:
    """Prepend ``wake`` to the first positional word when it is not a known command."""
    i = 0

    while i < len(argv):
        arg = argv[i]

        if arg in VALUE_OPTIONS:
            i += 2
            continue

        if arg.startswith('-'):
            i += 1
            continue

        if arg.lower() in COMMANDS:
            return argv[:i] + [arg.lower()] + argv[i + 1:]

        return argv[:i] + ['wake'] + argv[i:]

    return argv

def run_command(wakectl: WakeCtlManager, args: argparse.Namespace, wake_config: WakeModel | None) -> None:
    if args.command == 'alias':
        wakectl.add_alias(args.name, args.mac, args.iface)
    elif args.command == 'list':
        aliases = wakectl.list_aliases()

        if not aliases:
            print(f'No aliases found! Add one with "{__package_name__} alias <name> <mac>"')

        for name, alias in aliases.items():
            print(f'    {name} - {alias.mac} {alias.iface}')
    elif args.command == 'remove':
        wakectl.remove_alias(args.name)
    elif args.command == 'interfaces':
        print('Available network interfaces:')

        for interface in wakectl.list_interfaces():
            print(f'  {interface}')
    elif args.command == 'wake':
        print(f'Attempting to send a magic packet to {args.token}')
        print(f'... Broadcasting to: {wake_config.broadcast}:{wake_config.port}')

        result = wakectl.wake(args.token, wake_config)

        print(f'Magic packet sent successfully to {result.mac}')
