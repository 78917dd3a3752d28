from .__about__ import __version__  # noqa
from .copying import COPIERS, deep_copy, default_copier, shallow_copy  # noqa
from .core import DeferredVec  # noqa
from .deco import deferred  # noqa
from .errors import DeferredInconsistencyError  # noqa
from .threadsafe import LockedDeferredVec  # noqa
