# backend/models/users.py
from sqlalchemy import Column, Integer, String
from database import Base

# Represents a user account with its hashed password and access role
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    password = Column(String(255), nullable=False) # bcrypt hash
    role = Column(String(20), nullable=False) # "operator" or "manager"
