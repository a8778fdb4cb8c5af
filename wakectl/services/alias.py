import logging
from pydantic import ValidationError
from wakectl.exceptions import AliasValidationError, AliasNotFoundError, DatastoreError
from wakectl.libraries.datastore import Datastore
from wakectl.models.alias import AliasModel

__all__ = ['AliasService', 'AliasFound', 'NotAnAlias']

class AliasFound:
    def __init__(self, alias: AliasModel):
        self._alias: AliasModel = alias

    @property
    def alias(self) -> AliasModel:
        return self._alias

    def __repr__(self):
        return f'AliasFound(alias={self._alias!r})'

class NotAnAlias:
    def __init__(self, token: str):
        self._token: str = token

    @property
    def token(self) -> str:
        return self._token

    def __repr__(self):
        return f'NotAnAlias(token={self._token!r})'

class AliasService:
    def __init__(self, *, datastore: Datastore, logger: logging.Logger):
        self._datastore: Datastore = datastore
        self._logger: logging.Logger = logger

    def add(self, name: str, mac: str, iface: str = '') -> AliasModel:
        # MAC syntax is checked when the alias is used for a wake
        try:
            alias = AliasModel(name=name, mac=mac, iface=iface or '')
        except ValidationError as e:
            fields = ', '.join(str(error['loc'][0]) for error in e.errors(include_url=False) if error['loc'])
            raise AliasValidationError(f'Alias requires a non-empty name and mac (invalid: {fields or "general"})') from e

        if self._datastore.get(alias.name) is not None:
            self._logger.info(f'Overwriting existing alias "{alias.name}"')

        self._datastore.set(alias.name, alias.model_dump_json().encode('utf-8'))

        self._logger.debug(f'Stored alias "{alias.name}" -> {alias.mac} {alias.iface}')

        return alias

    def get(self, name: str) -> AliasModel:
        raw = self._datastore.get(name)

        if raw is None:
            raise AliasNotFoundError(name)

        return self._decode(name, raw)

    def lookup(self, token: str) -> AliasFound | NotAnAlias:
        try:
            return AliasFound(self.get(token))
        except AliasNotFoundError:
            self._logger.debug(f'"{token}" is not an alias, using it as a MAC address')
            return NotAnAlias(token)

    def list(self) -> dict[str, AliasModel]:
        return {name: self._decode(name, raw) for name, raw in self._datastore.items()}

    def delete(self, name: str) -> None:
        if not self._datastore.delete(name):
            raise AliasNotFoundError(name)

        self._logger.debug(f'Removed alias "{name}"')

    def _decode(self, name: str, raw: bytes) -> AliasModel:
        try:
            return AliasModel.model_validate_json(raw)
        except ValidationError as e:
            raise DatastoreError(f'Stored entry for alias "{name}" is corrupt: {e.error_count()} error(s)') from e
