# backend/models/session.py
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, func
from database import Base

# Server-side session state, keyed by the opaque id carried in the session cookie
class ServerSession(Base):
    __tablename__ = "sessions"

    session_id = Column(String(128), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    role = Column(String(20), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    expires_at = Column(DateTime, nullable=False, index=True)
