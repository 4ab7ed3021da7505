# order_it/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from sqlalchemy.pool import StaticPool

from .config import DB_URL, DB_SSL_CA


def _engine_kwargs(url):
    if url.startswith("sqlite"):
        # in-memory SQLite must share one connection across threads
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return kwargs
    if DB_SSL_CA:
        return {"connect_args": {"ssl": {"ca": DB_SSL_CA}}}
    return {}


# pool_pre_ping recovers dropped connections
engine = create_engine(
    DB_URL,
    pool_pre_ping=True,
    echo=False,  # set True to log SQL
    future=True,
    **_engine_kwargs(DB_URL),
)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


class Base(DeclarativeBase):
    pass


# FastAPI dependency: one session per request, always closed
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
