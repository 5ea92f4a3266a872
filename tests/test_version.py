from importlib import metadata

import pytest

from inline_assets import version


def test_installed_version(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(version.metadata, "version", lambda name: {"inline-assets": "1.2.3"}[name])
    assert version.tool_version() == "1.2.3"


def test_version_of_uninstalled_checkout(monkeypatch: pytest.MonkeyPatch):
    def missing(name):
        raise metadata.PackageNotFoundError(name)

    monkeypatch.setattr(version.metadata, "version", missing)
    assert version.tool_version() == version.UNKNOWN_VERSION
