"""Shared test fixtures for the mdchain test suite."""

from __future__ import annotations

from typing import Any

import pytest

from mdchain.config import DocumentConfig
from mdchain.document import Document
from mdchain.render.serializer import MarkdownSerializer


class RecordingMetricsHook:
    """A metrics backend that records all calls for assertion."""

    def __init__(self) -> None:
        self.increments: list[dict[str, Any]] = []
        self.timings: list[dict[str, Any]] = []
        self.gauges: list[dict[str, Any]] = []

    def increment(
        self,
        name: str,
        value: int = 1,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.increments.append({"name": name, "value": value, "tags": tags})

    def timing(
        self,
        name: str,
        ms: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.timings.append({"name": name, "ms": ms, "tags": tags})

    def gauge(
        self,
        name: str,
        value: float,
        tags: dict[str, str] | None = None,
    ) -> None:
        self.gauges.append({"name": name, "value": value, "tags": tags})


@pytest.fixture
def config() -> DocumentConfig:
    """Default test configuration with a fixed ``\\n`` line terminator."""
    return DocumentConfig(newline="\n")


@pytest.fixture
def doc(config: DocumentConfig) -> Document:
    """Empty document using the default test config."""
    return Document(config)


@pytest.fixture
def serializer(config: DocumentConfig) -> MarkdownSerializer:
    """Serializer using the default test config."""
    return MarkdownSerializer(config)


@pytest.fixture
def metrics() -> RecordingMetricsHook:
    return RecordingMetricsHook()
