"""
RefreshToken model: opaque refresh tokens issued at login.
Fields:
- token (primary key) - 64 char lowercase hex string
- user_id (String(36)) - FK to users.id, cascades on user deletion
- created_at, updated_at, expires_at
- revoked_at (nullable) - null while the token is active

A token is usable iff revoked_at is null and expires_at is in the future.
"""
from sqlalchemy import Column, String, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from models.base_model import Base, TimestampMixin


class RefreshToken(TimestampMixin, Base):
    __tablename__ = "refresh_tokens"

    token = Column(String(256), primary_key=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    expires_at = Column(DateTime, nullable=False)
    revoked_at = Column(DateTime, nullable=True)

    user = relationship("User", back_populates="refresh_tokens")

    __table_args__ = (
        Index("refresh_tokens_user_id_idx", "user_id"),
    )

    def __repr__(self):
        return f"<RefreshToken user={self.user_id} revoked={self.revoked_at is not None}>"
