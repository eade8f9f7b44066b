"""Database setup helpers (SQLAlchemy engine/session)."""
from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

# Load environment variables from the project root .env
project_dir = Path(__file__).parent.parent.parent.parent
load_dotenv(project_dir / ".env")

from travel_records.config import settings  # noqa: E402

DATABASE_URL = settings.get_database_url()

engine = create_engine(DATABASE_URL, future=True, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine, future=True)
Base = declarative_base()
