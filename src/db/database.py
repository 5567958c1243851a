from sqlalchemy import create_engine, Column, String, Text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker
import os
import logging

from src.cache.store import CacheWriteError

# Get logger
logger = logging.getLogger(__name__)

DATABASE_URL = os.getenv("GEO_CACHE_DB_URL", "sqlite:///geo_cache.db")
Base = declarative_base()

# One row per cached lookup; namespace separates reverse and forward entries
class GeocodeCacheDB(Base):
    __tablename__ = "geocode_cache"
    namespace = Column(String(32), primary_key=True)
    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)

engine = create_engine(DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def create_tables(bind=None):
    try:
        Base.metadata.create_all(bind=bind or engine)
        logger.info("Cache tables created (if they didn't exist previously).")
    except Exception as e:
        logger.error(f"Error creating cache tables: {e}")
        raise

class SqlCacheStore:
    """
    Key/value store over the geocode_cache table, same contract as FileCacheStore.
    """

    def __init__(self, namespace, session_factory=None):
        self.namespace = namespace
        self.session_factory = session_factory or SessionLocal

    def get(self, key):
        db = self.session_factory()
        try:
            row = db.get(GeocodeCacheDB, (self.namespace, key))
            return row.value if row else None
        finally:
            db.close()

    def put(self, key, value):
        db = self.session_factory()
        try:
            db.merge(GeocodeCacheDB(namespace=self.namespace, key=key, value=value))
            db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error writing cache entry {self.namespace}/{key}: {e}")
            db.rollback()
            raise CacheWriteError(f"Could not write cache entry {self.namespace}/{key}: {e}") from e
        finally:
            db.close()
