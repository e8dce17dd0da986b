"""
Script to initialize the database tables.
"""
from app.db.base import Base, engine
import app.models  # noqa: F401  registers models on Base.metadata


def init() -> None:
    """Initialize database."""
    print("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    print("✅ Database tables created")


if __name__ == "__main__":
    init()
