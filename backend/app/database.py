import os
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "")

# Hosted Postgres often hands out postgres:// but SQLAlchemy needs postgresql://
if DATABASE_URL.startswith("postgres://"):
    DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)

engine = create_engine(DATABASE_URL) if DATABASE_URL else None
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine) if engine else None
Base = declarative_base()


def create_tables() -> None:
    """Create the holiday tables when a database is configured."""
    if engine is None:
        raise RuntimeError("DATABASE_URL not configured")
    from app.models import db_models  # noqa: F401 - registers the tables on Base

    Base.metadata.create_all(bind=engine)


def get_db_optional():
    """Yields a session when DATABASE_URL is set, otherwise None; the bundled holiday calendar is used then."""
    if not SessionLocal:
        yield None
        return
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
