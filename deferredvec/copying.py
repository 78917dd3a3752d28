"""Strategies for handing out independent copies of the cached contents."""
import copy
import os
import typing as ty

from .types import Copier

_COPY_ENV_VAR = "DEFERREDVEC_COPY"


def deep_copy(items: list) -> list:
    return copy.deepcopy(items)


def shallow_copy(items: list) -> list:
    """A new list, but the elements are the cached objects themselves.

    Only appropriate when the elements are immutable or the caller
    promises not to mutate them.
    """
    return list(items)


COPIERS: ty.Mapping[str, Copier] = dict(deep=deep_copy, shallow=shallow_copy)


def default_copier() -> Copier:
    """Reads DEFERREDVEC_COPY on every call so tests and long-lived
    processes can change it without reimporting.
    """
    name = os.environ.get(_COPY_ENV_VAR, "deep")
    try:
        return COPIERS[name]
    except KeyError:
        raise ValueError(
            f"{_COPY_ENV_VAR} must be one of {sorted(COPIERS)}, not {name!r}"
        ) from None
