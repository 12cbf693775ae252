"""TokenBlacklistRepository tests against an in-memory SQLite database."""

from datetime import datetime, timedelta, timezone

from sqlalchemy import func, select

from src.notekeep.core.models.blacklisted_token import BlacklistedToken
from src.notekeep.core.repositories.token_blacklist_repository import TokenBlacklistRepository


def _in(minutes: int) -> datetime:
    return datetime.now(timezone.utc) + timedelta(minutes=minutes)


async def _count(session) -> int:
    result = await session.execute(select(func.count()).select_from(BlacklistedToken))
    return result.scalar_one()


async def test_added_token_is_blacklisted(test_session):
    repo = TokenBlacklistRepository(test_session)
    await repo.add_token("token-a", _in(30))

    assert await repo.is_blacklisted("token-a") is True
    assert await repo.is_blacklisted("token-b") is False


async def test_add_token_is_idempotent(test_session):
    repo = TokenBlacklistRepository(test_session)
    first = await repo.add_token("token-a", _in(30))
    second = await repo.add_token("token-a", _in(30))

    assert first.id == second.id
    assert await _count(test_session) == 1


async def test_lapsed_entry_not_reported(test_session):
    repo = TokenBlacklistRepository(test_session)
    await repo.add_token("token-a", _in(-1))

    assert await repo.is_blacklisted("token-a") is False


async def test_delete_expired_tokens_keeps_live_entries(test_session):
    repo = TokenBlacklistRepository(test_session)
    await repo.add_token("old-1", _in(-10))
    await repo.add_token("old-2", _in(-1))
    await repo.add_token("live", _in(10))

    removed = await repo.delete_expired_tokens()

    assert removed == 2
    assert await _count(test_session) == 1
    assert await repo.is_blacklisted("live") is True
