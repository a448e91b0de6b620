"""
Unit Tests for the Session Manager
==================================
"""

import json

import pytest

from authflow_core import StorageUnavailable, format_duration


class TestSessionManager:
    """Tests for create/current/destroy."""

    @pytest.mark.asyncio
    async def test_round_trip(self, flow):
        """create then current should return the same active session."""
        created = await flow.sessions.create("a@b.com")
        current = await flow.sessions.current()

        assert current is not None
        assert current.identity == "a@b.com"
        assert current.active is True
        assert current.start_time == created.start_time

    @pytest.mark.asyncio
    async def test_destroy_clears_session(self, flow):
        await flow.sessions.create("a@b.com")
        await flow.sessions.destroy()

        assert await flow.sessions.current() is None

    @pytest.mark.asyncio
    async def test_destroy_is_idempotent(self, flow):
        """Destroying with no session should not log SESSION_END."""
        await flow.sessions.destroy()
        await flow.sessions.destroy()

        history = await flow.events.history()
        assert all(e["name"] != "SESSION_END" for e in history)

    @pytest.mark.asyncio
    async def test_destroy_logs_duration(self, flow, clock):
        await flow.sessions.create("a@b.com")
        clock.advance(90)
        await flow.sessions.destroy()

        history = await flow.events.history()
        assert history[-1]["name"] == "SESSION_END"
        assert history[-1]["details"] == {"identity": "a@b.com", "durationSec": 90.0}

    @pytest.mark.asyncio
    async def test_create_overwrites_previous(self, flow):
        await flow.sessions.create("a@b.com")
        await flow.sessions.create("c@d.com")

        current = await flow.sessions.current()
        assert current.identity == "c@d.com"

    @pytest.mark.asyncio
    async def test_inactive_session_ignored(self, flow, storage, config):
        await storage.set(
            config.session_key,
            json.dumps({"identity": "a@b.com", "startTime": 0, "active": False}),
        )

        assert await flow.sessions.current() is None

    @pytest.mark.asyncio
    async def test_corrupt_session_ignored(self, flow, storage, config):
        await storage.set(config.session_key, "][")
        assert await flow.sessions.current() is None

        await storage.set(config.session_key, json.dumps({"active": True}))
        assert await flow.sessions.current() is None

    @pytest.mark.asyncio
    async def test_out_of_range_start_time_ignored(self, flow, storage, config):
        """An unrepresentable startTime means no session, not an error."""
        await storage.set(
            config.session_key,
            json.dumps({"identity": "a@b.com", "startTime": 10 ** 20, "active": True}),
        )

        assert await flow.sessions.current() is None
        await flow.sessions.destroy()
        assert await storage.get(config.session_key) is None

    @pytest.mark.asyncio
    async def test_read_fault_means_no_session(self, flow, storage):
        await flow.sessions.create("a@b.com")
        storage.fail_reads = True

        assert await flow.sessions.current() is None

    @pytest.mark.asyncio
    async def test_create_surfaces_write_fault(self, flow, storage):
        storage.fail_writes = True

        with pytest.raises(StorageUnavailable):
            await flow.sessions.create("a@b.com")


class TestFormatDuration:

    def test_format(self):
        assert format_duration(0) == "0:00"
        assert format_duration(65) == "1:05"
        assert format_duration(3600) == "60:00"

    def test_negative_clamped(self):
        assert format_duration(-5) == "0:00"
