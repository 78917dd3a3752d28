import threading
import typing as ty

from .core import DeferredVec
from .types import Copier, Producer, T


class LockedDeferredVec(DeferredVec[T]):
    """A DeferredVec that may be shared across threads.

    The first production is guarded by a lock, so racing callers will
    see exactly one producer call and all of them observe the same
    contents. Once produced, reads take no lock.

    The lock is reentrant so a producer that reads its own container
    recurses and fails with RecursionError instead of hanging.

    A producer failure releases the lock without storing anything, so
    one of the waiting threads (or the next caller) will retry.
    """

    def __init__(self, producer: Producer[T], *, copier: ty.Optional[Copier] = None):
        super().__init__(producer, copier=copier)
        self.lock = threading.RLock()

    def _fetch(self) -> ty.List[T]:
        storage = self._storage
        if storage is not None:
            return storage
        with self.lock:
            # someone else may have produced while we waited
            if self._storage is None:
                self._storage = self._produce()
            return self._storage
