import logging
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from jobly.core.config import settings

logger = logging.getLogger(__name__)


def build_engine(database_uri: str, production: bool = False) -> Engine:
    """
    Create the SQLAlchemy engine for a database URI.

    In production the connection is encrypted but the server certificate is
    not verified (sslmode=require). SQLite URIs (used by the test suite) get a
    single shared connection so in-memory data survives across sessions.
    """
    url = make_url(database_uri)

    if url.get_backend_name() == "sqlite":
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    connect_args = {"sslmode": "require"} if production else {}
    return create_engine(
        url,
        connect_args=connect_args,
        pool_pre_ping=True,  # Verify connections before using them
        pool_size=10,
        max_overflow=20
    )


engine = build_engine(settings.get_database_uri(), production=settings.is_production)
logger.info(f"Database engine configured: {engine.url.render_as_string(hide_password=True)}")

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """
    Initialize database.

    Imports the models so they are registered on Base.metadata, then creates
    any missing tables. There is no migration tooling; existing tables are
    left untouched.
    """
    from jobly.models import job, user  # noqa: F401  Import models to register them
    Base.metadata.create_all(bind=engine)
