"""Errors raised by deferred containers themselves.

Anything raised by a producer is not wrapped and will reach the caller
exactly as it was raised.
"""


class DeferredInconsistencyError(AssertionError):
    """Storage was still absent after the production step ran.

    This means an internal invariant is broken, not that the caller did
    anything wrong, so there is nothing sensible to recover.
    """
