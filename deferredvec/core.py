"""A sequence whose contents are produced on first use and then cached."""
import timeit
import typing as ty
from logging import getLogger

from .copying import default_copier
from .errors import DeferredInconsistencyError
from .types import Copier, Producer, T

logger = getLogger(__name__)


class DeferredVec(ty.Generic[T]):
    """Defers calling its producer until the contents are first needed.

    ```
    numbers = DeferredVec(lambda: expensive_query())
    assert numbers.is_deferred()
    first = numbers.get()  # the query runs here, and only here
    assert not numbers.is_deferred()
    ```

    Every read hands back a copy, so nothing a caller does to a
    returned list can change what later callers see.

    If the producer raises, the exception propagates untouched and the
    container stays deferred; the next access will call the producer
    again.

    Not safe for concurrent first access - two threads racing before
    production may both call the producer. Use LockedDeferredVec if
    you need that.
    """

    def __init__(self, producer: Producer[T], *, copier: ty.Optional[Copier] = None):
        self._producer = producer
        self._copier: Copier = copier or default_copier()
        self._storage: ty.Optional[ty.List[T]] = None

    @property
    def producer(self) -> Producer[T]:
        return self._producer

    def _produce(self) -> ty.List[T]:
        logger.debug(f"Producing deferred contents via {self._producer!r}")
        start = timeit.default_timer()
        produced = list(self._producer())
        ms_elapsed = (timeit.default_timer() - start) * 1000
        logger.debug(f"Produced {len(produced)} items in {ms_elapsed:.1f} ms")
        return produced

    def _fetch(self) -> ty.List[T]:
        """All accessors go through here. A no-op after the first success."""
        if self._storage is None:
            self._storage = self._produce()
        return self._storage

    def _require(self) -> ty.List[T]:
        # subclasses may override _fetch
        storage = self._fetch()
        if storage is None:
            raise DeferredInconsistencyError("Deferred storage is absent after production")
        return storage

    def get(self) -> ty.List[T]:
        """A copy of the produced contents, in the producer's order."""
        return self._copier(self._require())

    def __len__(self) -> int:
        return len(self._require())

    def len(self) -> int:
        return len(self)

    def is_deferred(self) -> bool:
        """True until the producer has successfully run. Never triggers it."""
        return self._storage is None

    def __iter__(self) -> ty.Iterator[T]:
        return iter(self.get())

    @ty.overload
    def __getitem__(self, index: int) -> T:
        ...  # pragma: nocover

    @ty.overload
    def __getitem__(self, index: slice) -> ty.List[T]:
        ...  # pragma: nocover

    def __getitem__(self, index):
        storage = self._require()
        if isinstance(index, slice):
            return self._copier(storage[index])
        return self._copier([storage[index]])[0]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DeferredVec):
            return self._require() == other._require()
        if isinstance(other, ty.Sequence) and not isinstance(other, (str, bytes)):
            return self._require() == list(other)
        return NotImplemented

    # mutable contents, so no hashing
    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        contents = "<deferred>" if self._storage is None else repr(self._storage)
        return f"{type(self).__name__}({contents})"

    def copy(self) -> "DeferredVec[T]":
        """A fresh, still-deferred container sharing this one's producer.

        The new container will call the producer again when it is used.
        """
        return type(self)(self._producer, copier=self._copier)
