import os
import fcntl
import logging
import lmdb
from abc import ABC, abstractmethod
from typing import Iterator
from wakectl.exceptions import DatastoreError, DatastoreLockedError

__all__ = ['Datastore', 'LmdbDatastore']

class Datastore(ABC):
    """Minimal storage capability used by the services.

    Keys are strings, values are raw bytes. Implementations own a single
    on-disk resource which is acquired by ``open()`` and released by ``close()``.
    """

    def __init__(self, filepath: str):
        self._filepath: str = filepath

    @property
    def filepath(self) -> str:
        return self._filepath

    @abstractmethod
    def open(self) -> None: ...

    @abstractmethod
    def get(self, key: str, default: bytes | None = None) -> bytes | None: ...

    @abstractmethod
    def set(self, key: str, value: bytes) -> None: ...

    @abstractmethod
    def delete(self, key: str) -> bool: ...

    @abstractmethod
    def items(self) -> Iterator[tuple[str, bytes]]: ...

    @abstractmethod
    def close(self) -> None: ...

    def __enter__(self) -> 'Datastore':
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

class LmdbDatastore(Datastore):
    MAP_SIZE = 10 * 1024 * 1024

    def __init__(self, filepath: str, *, map_size: int = MAP_SIZE):
        super().__init__(filepath)
        self._map_size: int = map_size
        self._env: lmdb.Environment | None = None
        self._lock_fd: int | None = None

    def __repr__(self):
        return f'LmdbDatastore(filepath={self._filepath})'

    @property
    def opened(self) -> bool:
        return self._env is not None

    def open(self) -> None:
        if self._env is not None:
            raise DatastoreError(f'Datastore "{self._filepath}" is already open')

        directory = os.path.dirname(self._filepath)

        try:
            if directory and not os.path.exists(directory):
                os.makedirs(directory)

            self._lock_fd = os.open(self._filepath, os.O_RDWR | os.O_CREAT, 0o600)
        except OSError as e:
            raise DatastoreError(f'Failed to open datastore "{self._filepath}": {e}') from e

        try:
            fcntl.flock(self._lock_fd, fcntl.LOCK_EX | fcntl.LOCK_NB)
        except OSError as e:
            self._release_lock()
            raise DatastoreLockedError(f'Datastore "{self._filepath}" is in use by another process') from e

        try:
            self._env = lmdb.open(self._filepath, subdir=False, map_size=self._map_size, max_dbs=0)
        except lmdb.Error as e:
            self._release_lock()
            raise DatastoreError(f'Failed to open datastore "{self._filepath}": {e}') from e

        logging.debug(f'Opened datastore {self._filepath}')

    def get(self, key: str, default: bytes | None = None) -> bytes | None:
        env = self._require_env()

        # lmdb rejects zero-length keys, nothing can be stored under one
        if not key:
            return default

        try:
            with env.begin() as txn:
                value = txn.get(key.encode('utf-8'))
        except lmdb.Error as e:
            raise DatastoreError(f'Failed to read key "{key}": {e}') from e

        if value is None:
            return default

        return bytes(value)

    def set(self, key: str, value: bytes) -> None:
        env = self._require_env()

        try:
            with env.begin(write=True) as txn:
                txn.put(key.encode('utf-8'), value, overwrite=True)
        except lmdb.Error as e:
            raise DatastoreError(f'Failed to write key "{key}": {e}') from e

    def delete(self, key: str) -> bool:
        env = self._require_env()

        if not key:
            return False

        try:
            with env.begin(write=True) as txn:
                return txn.delete(key.encode('utf-8'))
        except lmdb.Error as e:
            raise DatastoreError(f'Failed to delete key "{key}": {e}') from e

    def items(self) -> Iterator[tuple[str, bytes]]:
        env = self._require_env()

        try:
            with env.begin() as txn:
                # materialize inside the transaction, cursor buffers are only valid there
                entries = [(key.decode('utf-8'), bytes(value)) for key, value in txn.cursor()]
        except lmdb.Error as e:
            raise DatastoreError(f'Failed to iterate datastore: {e}') from e

        return iter(entries)

    def close(self) -> None:
        if self._env is not None:
            self._env.close()
            self._env = None

            logging.debug(f'Closed datastore {self._filepath}')

        self._release_lock()

    def _require_env(self) -> lmdb.Environment:
        if self._env is None:
            raise DatastoreError(f'Datastore "{self._filepath}" is not open')

        return self._env

    def _release_lock(self) -> None:
        if self._lock_fd is None:
            return

        try:
            fcntl.flock(self._lock_fd, fcntl.LOCK_UN)
        finally:
            os.close(self._lock_fd)
            self._lock_fd = None
