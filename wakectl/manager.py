import os
import logging
from logging.handlers import TimedRotatingFileHandler
from wakectl.libraries.datastore import Datastore, LmdbDatastore
from wakectl.libraries.interfaces import InterfaceResolver
from wakectl.models.alias import AliasModel
from wakectl.models.interface import InterfaceModel
from wakectl.models.store import StoreModel
from wakectl.models.wake import WakeModel
from wakectl.services.alias import AliasService
from wakectl.services.wake import WakeService, WakeResult
from wakectl.utils.logging import LEVELS, formatter_factory

__all__ = ['WakeCtlManager']

class WakeCtlManager:
    def __init__(self, *, log_file: str = '', log_level: str = '', store: StoreModel | None = None, datastore: Datastore | None = None) -> None:
        self._log_file: str = log_file
        self._log_level: str = log_level
        self._store: StoreModel = store or StoreModel()

        self._logger: logging.Logger = self._logger_factory(self._log_file, self._log_level)
        self._datastore: Datastore = datastore or LmdbDatastore(self._store.filepath)
        self._aliases: AliasService = self._aliases_factory()

    def __enter__(self) -> 'WakeCtlManager':
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def open(self) -> None:
        self._datastore.open()
        self._logger.debug(f'Using alias store {self._datastore.filepath}')

    def close(self) -> None:
        self._datastore.close()

    def add_alias(self, name: str, mac: str, iface: str = '') -> AliasModel:
        alias = self._aliases.add(name, mac, iface)
        self._logger.info(f'Alias "{alias.name}" saved')

        return alias

    def list_aliases(self) -> dict[str, AliasModel]:
        return self._aliases.list()

    def remove_alias(self, name: str) -> None:
        self._aliases.delete(name)
        self._logger.info(f'Alias "{name}" removed')

    def list_interfaces(self) -> list[InterfaceModel]:
        return InterfaceResolver.list_interfaces()

    def wake(self, token: str, config: WakeModel | None = None) -> WakeResult:
        wake = self._wake_factory(config or WakeModel())

        return wake.wake(token)

    def _logger_factory(self, log_file: str, log_level: str) -> logging.Logger:
        format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

        if not log_level in LEVELS:
            log_level = "INFO"

        logger = logging.getLogger()
        logger.setLevel(LEVELS[log_level])

        if log_file:
            directory = os.path.dirname(log_file)

            if directory and not os.path.exists(directory):
                os.makedirs(directory)

            handler = TimedRotatingFileHandler(log_file, when="midnight", backupCount=4)
        else:
            handler = logging.StreamHandler()

        handler.setLevel(LEVELS[log_level])
        handler.setFormatter(formatter_factory(log_level, format))

        logger.addHandler(handler)

        return logger

    def _aliases_factory(self) -> AliasService:
        aliases_logger = self._logger.getChild('alias')

        return AliasService(datastore=self._datastore, logger=aliases_logger)

    def _wake_factory(self, config: WakeModel) -> WakeService:
        wake_logger = self._logger.getChild('wake')

        return WakeService(config, aliases=self._aliases, logger=wake_logger)
