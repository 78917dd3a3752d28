import typing as ty
from logging import getLogger

import pytest

logger = getLogger(__name__)

T = ty.TypeVar("T")


class CountingProducer(ty.Generic[T]):
    """Wraps a producer and records how many times it has been called."""

    def __init__(self, produce: ty.Callable[[], ty.List[T]]):
        self.produce = produce
        self.calls = 0

    def __call__(self) -> ty.List[T]:
        self.calls += 1
        logger.debug(f"producer call number {self.calls}")
        return self.produce()


@pytest.fixture
def counting_producer() -> ty.Callable[[ty.List], CountingProducer]:
    def make(values: ty.List[T]) -> CountingProducer[T]:
        return CountingProducer(lambda: list(values))

    return make


@pytest.fixture
def deep_copy_default(monkeypatch):
    monkeypatch.delenv("DEFERREDVEC_COPY", raising=False)
