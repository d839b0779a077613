"""Tests for Streamlit Altair dependency checks."""

import sys
import types

from src.adapters.interface.streamlit import app


def _install(monkeypatch, numpy, pandas) -> None:
    monkeypatch.setitem(sys.modules, "numpy", numpy)
    monkeypatch.setitem(sys.modules, "pandas", pandas)


def test_check_altair_dependencies_ok(monkeypatch) -> None:
    _install(
        monkeypatch,
        types.SimpleNamespace(ndarray=object),
        types.SimpleNamespace(Timestamp=object),
    )

    assert app._check_altair_dependencies() == (True, None)


def test_check_altair_dependencies_reports_incomplete_numpy(
    monkeypatch,
) -> None:
    _install(
        monkeypatch,
        types.SimpleNamespace(),
        types.SimpleNamespace(Timestamp=object),
    )

    ok, message = app._check_altair_dependencies()

    assert ok is False
    assert "numpy" in message


def test_check_altair_dependencies_reports_incomplete_pandas(
    monkeypatch,
) -> None:
    _install(
        monkeypatch,
        types.SimpleNamespace(ndarray=object),
        types.SimpleNamespace(),
    )

    ok, message = app._check_altair_dependencies()

    assert ok is False
    assert "pandas" in message
