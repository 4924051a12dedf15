"""Unit tests for ExpirySweeper."""

import asyncio

from dishka import AsyncContainer
import pytest
import pytest_asyncio

from gate.application.sweeper import ExpirySweeper
from gate.config import SweeperSettings
from gate.domain.repository import InvitationRepository
from gate.domain.service import InvitationService, Notifier, RateLimiter
from gate.util.clock import Clock
from tests.di import build_test_container


@pytest_asyncio.fixture
async def container():
    container = build_test_container()
    yield container
    await container.close()


async def issue(container: AsyncContainer, email: str):
    async with container() as request_container:
        invitation_service = await request_container.get(InvitationService)
        return await invitation_service.issue_code(email)


class TestRunOnce:
    """Tests for run_once method."""

    @pytest.mark.asyncio
    async def test_notifies_each_stale_invitation(self, container):
        clock = await container.get(Clock)
        notifier = await container.get(Notifier)
        stale = await issue(container, "a@x.com")
        clock.advance(minutes=3)
        await issue(container, "b@x.com")

        clock.advance(minutes=2)
        sweeper = ExpirySweeper(container, SweeperSettings())
        notified = await sweeper.run_once()

        assert notified == 1
        assert len(notifier.sent) == 1
        email, context = notifier.sent[0]
        assert email == "a@x.com"
        assert context["kind"] == "invitation_expired"
        assert context["invitation_id"] == str(stale.id)

    @pytest.mark.asyncio
    async def test_every_sweep_renotifies(self, container):
        clock = await container.get(Clock)
        notifier = await container.get(Notifier)
        await issue(container, "a@x.com")
        clock.advance(minutes=10)
        sweeper = ExpirySweeper(container, SweeperSettings())

        await sweeper.run_once()
        await sweeper.run_once()

        assert [email for email, _ in notifier.sent] == ["a@x.com", "a@x.com"]

    @pytest.mark.asyncio
    async def test_notification_failure_does_not_stop_sweep(self, container):
        clock = await container.get(Clock)
        notifier = await container.get(Notifier)
        notifier.failing.add("fail@x.com")
        await issue(container, "fail@x.com")
        await issue(container, "ok@x.com")
        clock.advance(minutes=10)

        notified = await ExpirySweeper(container, SweeperSettings()).run_once()

        assert notified == 1
        assert [email for email, _ in notifier.sent] == ["ok@x.com"]

    @pytest.mark.asyncio
    async def test_query_failure_propagates(self, container, monkeypatch):
        repository = await container.get(InvitationRepository)

        async def broken(cutoff):
            raise RuntimeError("database unavailable")

        monkeypatch.setattr(repository, "find_unused_expired_before", broken)

        with pytest.raises(RuntimeError):
            await ExpirySweeper(container, SweeperSettings()).run_once()

    @pytest.mark.asyncio
    async def test_reclaims_idle_rate_limiter_buckets(self, container):
        clock = await container.get(Clock)
        rate_limiter = await container.get(RateLimiter)
        rate_limiter.try_acquire("1.2.3.4")

        clock.advance(days=1)
        await ExpirySweeper(container, SweeperSettings()).run_once()

        assert len(rate_limiter) == 0

    @pytest.mark.asyncio
    async def test_query_failure_still_reclaims_buckets(self, container, monkeypatch):
        clock = await container.get(Clock)
        rate_limiter = await container.get(RateLimiter)
        repository = await container.get(InvitationRepository)
        rate_limiter.try_acquire("1.2.3.4")

        async def broken(cutoff):
            raise RuntimeError("database unavailable")

        monkeypatch.setattr(repository, "find_unused_expired_before", broken)
        clock.advance(days=1)

        with pytest.raises(RuntimeError):
            await ExpirySweeper(container, SweeperSettings()).run_once()

        assert len(rate_limiter) == 0


class TestRunForever:
    """Tests for run_forever method."""

    @pytest.mark.asyncio
    async def test_query_failure_does_not_stop_loop(self, container, monkeypatch):
        repository = await container.get(InvitationRepository)
        stop_event = asyncio.Event()
        calls = []

        async def broken(cutoff):
            calls.append(cutoff)
            if len(calls) == 3:
                stop_event.set()
            raise RuntimeError("database unavailable")

        monkeypatch.setattr(repository, "find_unused_expired_before", broken)
        sweeper = ExpirySweeper(container, SweeperSettings(interval_seconds=0))

        await asyncio.wait_for(sweeper.run_forever(stop_event), timeout=5)

        assert len(calls) == 3

    @pytest.mark.asyncio
    async def test_stop_event_interrupts_sleep(self, container):
        stop_event = asyncio.Event()
        sweeper = ExpirySweeper(container, SweeperSettings(interval_seconds=3600))

        task = asyncio.create_task(sweeper.run_forever(stop_event))
        await asyncio.sleep(0.05)
        stop_event.set()

        await asyncio.wait_for(task, timeout=5)
        assert task.done()
