"""Shows a DeferredVec holding the result of a slow listing.

Run with `python examples/expensive_listing.py`.
"""
import logging
import time

from deferredvec import DeferredVec


def list_reports():
    time.sleep(0.5)
    return [f"report-{i:03d}" for i in range(20)]


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    reports = DeferredVec(list_reports)
    print("deferred?", reports.is_deferred(), reports)
    print("count:", len(reports))
    print("first three:", reports[:3])
    print("deferred?", reports.is_deferred())
