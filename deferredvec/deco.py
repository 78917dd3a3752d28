import typing as ty

from .core import DeferredVec
from .types import Copier, Producer, T


@ty.overload
def deferred(producer: Producer[T]) -> DeferredVec[T]:
    ...  # pragma: nocover


@ty.overload
def deferred(
    *, copier: ty.Optional[Copier] = None
) -> ty.Callable[[Producer[T]], DeferredVec[T]]:
    ...  # pragma: nocover


def deferred(producer=None, *, copier=None):
    """Turns a zero-argument function into a module-level DeferredVec.

    ```
    @deferred
    def ALL_REGIONS() -> ty.List[str]:
        return fetch_regions()

    len(ALL_REGIONS)  # fetches now
    ```

    Use `@deferred(copier=shallow_copy)` to choose how reads are copied.
    """
    if producer is not None:
        return DeferredVec(producer, copier=copier)

    def make_deferred(producer: Producer[T]) -> DeferredVec[T]:
        return DeferredVec(producer, copier=copier)

    return make_deferred
