from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker

from evenue.config import settings
from evenue.models import Base

# Extensions the schema depends on: uuid_generate_v4() and crypt()/gen_salt()
REQUIRED_EXTENSIONS = ("uuid-ossp", "pgcrypto")

# Create database engine
engine = create_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_pre_ping=True
)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """Dependency to get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def install_extensions(conn):
    """Install the PostgreSQL extensions used by column defaults and logins."""
    for extension in REQUIRED_EXTENSIONS:
        conn.execute(text(f'CREATE EXTENSION IF NOT EXISTS "{extension}"'))


def create_tables():
    """Create all tables in the database."""
    with engine.begin() as conn:
        install_extensions(conn)
        Base.metadata.create_all(bind=conn)
