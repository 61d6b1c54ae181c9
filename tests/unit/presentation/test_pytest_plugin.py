"""Tests for presentation/pytest_plugin helpers."""

from __future__ import annotations

from dataclasses import dataclass, field

from fastlinks.presentation.pytest_plugin import pytest_addoption
from fastlinks.presentation.pytest_plugin.fixtures import _get_ini_value


@dataclass
class FakeConfig:
    values: dict[str, str] = field(default_factory=dict)

    def getini(self, name: str) -> str:
        return self.values.get(name, "")


@dataclass
class FakeParser:
    options: list[tuple[str, str]] = field(default_factory=list)

    def addini(self, name: str, help: str, default: str = "") -> None:  # noqa: A002
        self.options.append((name, default))


class TestGetIniValue:
    def test_value_set(self) -> None:
        config = FakeConfig({"fastlinks_base_uri": "http://ini"})
        assert _get_ini_value(config, "fastlinks_base_uri", "http://x") == "http://ini"  # type: ignore[arg-type]

    def test_empty_falls_back(self) -> None:
        assert _get_ini_value(FakeConfig(), "fastlinks_base_uri", "http://x") == "http://x"  # type: ignore[arg-type]


class TestAddOption:
    def test_registers_base_uri(self) -> None:
        parser = FakeParser()
        pytest_addoption(parser)  # type: ignore[arg-type]
        assert parser.options == [("fastlinks_base_uri", "")]
