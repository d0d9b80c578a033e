"""Pytest configuration: asyncio support and fresh config per test."""

from __future__ import annotations

import asyncio
import inspect

import pytest

import config as config_module

_ENV_KEYS = (
    "APP_ENV",
    "PORT",
    "LOG_LEVEL",
    "ALLOWED_ORIGINS",
    "ANALYZE_DELAY_MS",
    "HISTORY_TIME_FORMAT",
)


def pytest_configure(config):  # pragma: no cover - pytest hook
    config.addinivalue_line("markers", "asyncio: run an async test on a fresh event loop")


def pytest_pyfunc_call(pyfuncitem):  # pragma: no cover - pytest hook
    """Allow pytest to run ``async def`` tests without extra plugins."""
    test_func = pyfuncitem.obj

    if not inspect.iscoroutinefunction(test_func):
        return None

    sig = inspect.signature(test_func)
    call_args = {
        name: value
        for name, value in pyfuncitem.funcargs.items()
        if name in sig.parameters
    }
    loop = asyncio.new_event_loop()
    try:
        asyncio.set_event_loop(loop)
        loop.run_until_complete(test_func(**call_args))
    finally:
        asyncio.set_event_loop(None)
        loop.close()
    return True


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch):
    """Start every test from default settings with no simulated delay."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("ANALYZE_DELAY_MS", "0")
    cfg = config_module.reset_config()
    yield cfg
    config_module.reset_config()
