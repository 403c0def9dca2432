from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
import os
import logging
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

# Get DB URL
DATABASE_URL = os.getenv("DATABASE_URL")

if DATABASE_URL is None:
    logger.error("DATABASE_URL is not set in the environment variables.")
    raise ValueError("DATABASE_URL is not set in the environment variables.")

# SQLite connections are shared across the threadpool FastAPI runs sync code in
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

# Create SQLAlchemy engine
try:
    engine = create_engine(DATABASE_URL, connect_args=connect_args)
    logger.debug("SQLAlchemy engine created successfully.")
except Exception as e:
    logger.error(f"Failed to create engine: {e}")
    raise

# Create sessionmaker
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create base class for models
Base = declarative_base()

# Dependency to get DB session
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
