"""Token blacklist repository for database operations."""

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import and_, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.blacklisted_token import BlacklistedToken

logger = logging.getLogger(__name__)


class TokenBlacklistRepository:
    """Repository for revoked session tokens."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_token(self, token: str) -> Optional[BlacklistedToken]:
        """Get blacklist entry by token string."""
        stmt = select(BlacklistedToken).where(BlacklistedToken.token == token)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def add_token(self, token: str, expires_at: datetime) -> BlacklistedToken:
        """Blacklist a token; adding the same token twice is a no-op."""
        existing = await self.get_by_token(token)
        if existing:
            return existing

        entry = BlacklistedToken(token=token, expires_at=expires_at)
        self.session.add(entry)
        await self.session.commit()
        await self.session.refresh(entry)
        return entry

    async def is_blacklisted(self, token: str) -> bool:
        """Check if token is blacklisted and the entry has not lapsed."""
        now = datetime.now(timezone.utc)
        stmt = select(BlacklistedToken.id).where(
            and_(BlacklistedToken.token == token, BlacklistedToken.expires_at > now)
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def delete_expired_tokens(self) -> int:
        """Delete entries whose token has expired anyway."""
        now = datetime.now(timezone.utc)
        stmt = delete(BlacklistedToken).where(BlacklistedToken.expires_at <= now)
        result = await self.session.execute(stmt)
        await self.session.commit()
        if result.rowcount:
            logger.debug(f"Pruned {result.rowcount} expired blacklist entries")
        return result.rowcount
