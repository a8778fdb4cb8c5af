"""Tests for command line derived models."""

import os

import pytest
from pydantic import ValidationError

from wakectl.models.store import StoreModel


class TestStoreModel:
    def test_default_path_is_under_home(self):
        store = StoreModel()

        assert store.filepath == os.path.join(os.path.expanduser("~"), ".config", "wakectl", "aliases.db")
        assert not store.filepath.startswith("~")

    def test_default_follows_home(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))

        assert StoreModel().db_dir == str(tmp_path / ".config" / "wakectl")

    def test_explicit_dir_is_expanded(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))

        assert StoreModel(db_dir="~/stores").filepath == str(tmp_path / "stores" / "aliases.db")

    @pytest.mark.parametrize("db_name", ["", "..", "sub/aliases.db"])
    def test_db_name_must_be_plain(self, db_name):
        with pytest.raises(ValidationError):
            StoreModel(db_name=db_name)
