__all__ = [
    'WakeCtlError',
    'InterfaceError',
    'InterfaceNotFoundError',
    'InterfaceDownError',
    'NoAddressAvailableError',
    'InvalidMacFormatError',
    'AliasValidationError',
    'AliasNotFoundError',
    'AddressResolutionError',
    'SendError',
    'ShortWriteError',
    'DatastoreError',
    'DatastoreLockedError',
]

class WakeCtlError(Exception):
    pass

class InterfaceError(WakeCtlError):
    def __init__(self, message: str, interface: str):
        super().__init__(message)
        self.interface = interface

class InterfaceNotFoundError(InterfaceError):
    pass

class InterfaceDownError(InterfaceError):
    pass

class NoAddressAvailableError(InterfaceError):
    pass

class InvalidMacFormatError(WakeCtlError):
    pass

class AliasValidationError(WakeCtlError):
    pass

class AliasNotFoundError(WakeCtlError):
    def __init__(self, name: str):
        super().__init__(f'Alias "{name}" not found')
        self.name = name

class AddressResolutionError(WakeCtlError):
    pass

class SendError(WakeCtlError):
    pass

class ShortWriteError(SendError):
    def __init__(self, sent: int, expected: int):
        super().__init__(f'Magic packet sent was {sent} bytes (expected {expected} bytes sent)')
        self.sent = sent
        self.expected = expected

class DatastoreError(WakeCtlError):
    pass

class DatastoreLockedError(DatastoreError):
    pass
