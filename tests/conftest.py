import asyncio

import pytest

from authflow_core import AuthFlowConfig, InMemoryStorage, ManualClock, create_auth_flow


class YieldingStorage(InMemoryStorage):
    """In-memory store that suspends on every call, like a network backend."""

    async def get(self, key):
        await asyncio.sleep(0)
        return await super().get(key)

    async def set(self, key, value):
        await asyncio.sleep(0)
        await super().set(key, value)

    async def remove(self, key):
        await asyncio.sleep(0)
        await super().remove(key)


class FixedRandom:
    """Random source that hands out a scripted sequence of codes."""

    def __init__(self, *values: int):
        self.values = list(values)

    def randint(self, a: int, b: int) -> int:
        value = self.values.pop(0)
        assert a <= value <= b
        return value


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def config():
    return AuthFlowConfig(otp_validity_seconds=60, max_attempts=3, key_prefix="pa")


@pytest.fixture
def flow(storage, config, clock):
    return create_auth_flow(storage, config=config, clock=clock)


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def yielding_storage():
    return YieldingStorage()


@pytest.fixture
def yielding_flow(yielding_storage, config, clock):
    return create_auth_flow(yielding_storage, config=config, clock=clock)
