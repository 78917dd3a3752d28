# pylint: disable=unused-argument
import pytest

from deferredvec import COPIERS, DeferredVec, deep_copy, default_copier, shallow_copy


def test_default_is_deep(deep_copy_default):
    assert default_copier() is deep_copy


def test_env_selects_copier(monkeypatch):
    monkeypatch.setenv("DEFERREDVEC_COPY", "shallow")
    assert default_copier() is shallow_copy

    inner = [1]
    dv = DeferredVec(lambda: [inner])
    assert dv.get()[0] is inner


def test_unknown_copier_name_is_rejected(monkeypatch):
    monkeypatch.setenv("DEFERREDVEC_COPY", "sideways")
    with pytest.raises(ValueError, match="DEFERREDVEC_COPY"):
        DeferredVec(lambda: [1])


def test_explicit_copier_beats_env(monkeypatch):
    monkeypatch.setenv("DEFERREDVEC_COPY", "sideways")
    dv = DeferredVec(lambda: [1], copier=shallow_copy)
    assert dv.get() == [1]


def test_copiers_return_new_lists():
    items = [[1], [2]]
    for copier in COPIERS.values():
        copied = copier(items)
        assert copied == items
        assert copied is not items
    assert deep_copy(items)[0] is not items[0]
    assert shallow_copy(items)[0] is items[0]
