from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, declarative_base

from charity_events.config import DB_POOL_SIZE, get_database_url

Base = declarative_base()


def build_engine(url: str = None):
    """Create the pooled engine every request session is bound to."""
    url = url or get_database_url()
    options = {"pool_pre_ping": True}
    if make_url(url).get_backend_name() != "sqlite":
        options["pool_size"] = DB_POOL_SIZE
    return create_engine(url, **options)


def build_session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Dependency for FastAPI routes
def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
