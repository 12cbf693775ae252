# Revoked session tokens
from datetime import datetime

from sqlalchemy import DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class BlacklistedToken(BaseModel):
    """Session token revoked by logout.

    Entries only matter until the token itself expires, so ``expires_at``
    mirrors the token's ``exp`` claim and drives pruning.
    """

    __tablename__ = "token_blacklist"

    token: Mapped[str] = mapped_column(String(2048), unique=True, nullable=False)
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        Index("idx_token_blacklist_expires_at", "expires_at"),
    )

    def __repr__(self) -> str:
        token_preview = f"{self.token[:8]}..." if self.token else "None"
        return f"<BlacklistedToken(token={token_preview}, expires_at={self.expires_at})>"
