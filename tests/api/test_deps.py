import asyncio
from types import SimpleNamespace

from src.api.deps import get_calculation_delay, simulate_latency
from src.config import settings


def test_delay_comes_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "calculation_delay_seconds", 1.5)
    assert get_calculation_delay() == 1.5


def test_zero_delay_does_not_sleep(monkeypatch):
    calls = []

    async def fake_sleep(seconds):
        calls.append(seconds)

    monkeypatch.setattr("src.api.deps.asyncio", SimpleNamespace(sleep=fake_sleep))
    asyncio.run(simulate_latency(0))
    asyncio.run(simulate_latency(0.25))
    assert calls == [0.25]
