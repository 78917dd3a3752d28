import typing as ty

from typing_extensions import Protocol

T = ty.TypeVar("T")
T_co = ty.TypeVar("T_co", covariant=True)


class Producer(Protocol[T_co]):
    """Takes no arguments and returns the ordered contents to be cached.

    Expected, but not required, to be deterministic. A DeferredVec
    calls it at most once per successful production.
    """

    def __call__(self) -> ty.Iterable[T_co]:
        ...  # pragma: nocover


Copier = ty.Callable[[ty.List[T]], ty.List[T]]
