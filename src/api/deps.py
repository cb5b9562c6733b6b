"""FastAPI dependency injection."""

import asyncio

from src.config import settings


def get_calculation_delay() -> float:
    return settings.calculation_delay_seconds


async def simulate_latency(delay: float) -> None:
    """Hold the response for the configured artificial delay."""
    if delay > 0:
        await asyncio.sleep(delay)
