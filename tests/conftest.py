"""Shared fixtures: temporary LMDB stores and fake psutil interface tables."""

import logging
from collections import namedtuple

import pytest

from wakectl.libraries.datastore import LmdbDatastore
from wakectl.services.alias import AliasService

snicaddr = namedtuple('snicaddr', ['family', 'address', 'netmask', 'broadcast', 'ptp'])
snicstats = namedtuple('snicstats', ['isup', 'duplex', 'speed', 'mtu', 'flags'])


@pytest.fixture(autouse=True)
def restore_root_logger():
    """The manager configures the root logger; undo that after every test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level

    yield

    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()

    root.setLevel(level)


@pytest.fixture
def store_path(tmp_path):
    return str(tmp_path / "wakectl" / "aliases.db")


@pytest.fixture
def datastore(store_path):
    store = LmdbDatastore(store_path)
    store.open()

    yield store

    store.close()


@pytest.fixture
def aliases(datastore):
    return AliasService(datastore=datastore, logger=logging.getLogger("test.alias"))
