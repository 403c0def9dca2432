from codevoyage.database import engine, Base
from codevoyage.models import Roadmap  # noqa: F401  registers the table
import logging

def init_db():
    """
    Initialize the database by creating all tables defined in the models.
    """
    try:
        Base.metadata.create_all(bind=engine)
        logging.info("Database tables created successfully!")

        tables = list(Base.metadata.tables.keys())
        logging.info(f"Created tables: {', '.join(tables)}")

    except Exception as e:
        logging.error(f"Error creating database tables: {str(e)}")
        raise

if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    init_db()
