"""Auth persistence models."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column

from mindmanaged.extensions import db


class TokenBlocklist(db.Model):
    """JWT ids revoked by logout."""

    __tablename__ = "token_blocklist"

    id: Mapped[int] = mapped_column(primary_key=True)
    jti: Mapped[str] = mapped_column(db.String(64), unique=True, nullable=False, index=True)
    user_id: Mapped[int | None] = mapped_column(db.Integer, index=True)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
