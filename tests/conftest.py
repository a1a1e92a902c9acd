from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Dict, Iterator

import pytest

from objkit.config.models import QueryStringConfig
from objkit.lang.hash import Hash
from objkit.lang.range import ObjectRange


@pytest.fixture
def plain_mapping() -> Dict[str, object]:
    return {"a": 1, "b": [2, 3], "c": None}


@pytest.fixture
def hash_factory() -> Callable[..., Hash]:
    def _factory(**overrides: object) -> Hash:
        payload: Dict[str, object] = {"x": 1, "y": 2}
        payload.update(overrides)
        return Hash(payload)

    return _factory


@pytest.fixture
def semicolon_query_config() -> QueryStringConfig:
    return QueryStringConfig(separator=";")


class Version:
    """Minimal value type that provides its own successor."""

    def __init__(self, number: int) -> None:
        self.number = number

    def succ(self) -> "Version":
        return Version(self.number + 1)

    def __lt__(self, other: "Version") -> bool:
        return self.number < other.number

    def __le__(self, other: "Version") -> bool:
        return self.number <= other.number

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Version) and other.number == self.number

    def __hash__(self) -> int:
        return hash(self.number)


@pytest.fixture
def version_range() -> ObjectRange:
    return ObjectRange(Version(1), Version(3))


@pytest.fixture
def week_range() -> ObjectRange:
    return ObjectRange(date(2024, 1, 1), date(2024, 1, 7))


@pytest.fixture
def isolated_logger() -> Iterator[str]:
    name = "objkit_test_logger"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
