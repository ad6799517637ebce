# backend/database.py
from sqlalchemy import create_engine
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import sessionmaker

from config import settings

SQLALCHEMY_DATABASE_URL = settings.database_url

# Connection options depend on the backing store
if "sqlite" in SQLALCHEMY_DATABASE_URL:
    connect_args = {"check_same_thread": False} # SQLite only
elif SQLALCHEMY_DATABASE_URL.startswith("mysql") and settings.DB_SSL:
    # Cloud MySQL providers require a verified TLS connection
    connect_args = {"ssl_verify_cert": True, "ssl_verify_identity": True}
else:
    connect_args = {}

engine = create_engine(
    SQLALCHEMY_DATABASE_URL, connect_args=connect_args, pool_pre_ping=True
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_db():
    # Register every model on Base.metadata before creating tables
    import models.users  # noqa: F401
    import models.handover  # noqa: F401
    import models.session  # noqa: F401

    Base.metadata.create_all(bind=engine)
