"""
Database Configuration and Management (SQLAlchemy)

Handles engine setup, schema initialization and pool usage persistence
using SQLAlchemy ORM.
"""

import logging
from datetime import datetime, timezone
from sqlalchemy import create_engine, select, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from config.models import Base, PoolUsage
from utils.exceptions import StorageError, InvalidReadingError

logger = logging.getLogger(__name__)

MIN_PERCENTAGE = 0
MAX_PERCENTAGE = 100

def create_db_engine(database_url, echo=False):
    """
    Create the connection pool for a single run.

    Args:
        database_url (str): SQLAlchemy database URL
        echo (bool): Log emitted SQL

    Returns:
        sqlalchemy.engine.Engine: Database engine

    Raises:
        StorageError: If the URL cannot be parsed or the driver is unavailable
    """
    try:
        return create_engine(database_url, echo=echo, pool_pre_ping=True)
    except (SQLAlchemyError, ImportError, ValueError) as e:
        raise StorageError(f"unable to parse DATABASE_URL: {e}") from e

def get_session_factory(engine):
    """
    Get a session factory bound to the engine.

    Returns:
        sqlalchemy.orm.sessionmaker: Session factory
    """
    return sessionmaker(autoflush=False, expire_on_commit=False, bind=engine)

def init_database(engine):
    """
    Create the pool_usage table if it does not exist. Safe to call repeatedly.
    """
    logger.info("Initializing database...")
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        raise StorageError(f"error creating table: {e}") from e
    logger.info("Database initialized successfully!")

def validate_percentage(percentage):
    """
    Reject anything that is not an integer percentage in the 0-100 range.
    """
    # bool is an int subclass
    if isinstance(percentage, bool) or not isinstance(percentage, int):
        raise InvalidReadingError(f"percentage must be an integer, got {percentage!r}")
    if not MIN_PERCENTAGE <= percentage <= MAX_PERCENTAGE:
        raise InvalidReadingError(
            f"percentage must be between {MIN_PERCENTAGE} and {MAX_PERCENTAGE}, got {percentage}"
        )
    return percentage

def record_usage(session_factory, percentage, timestamp=None):
    """
    Insert one pool usage reading.

    Args:
        session_factory (sessionmaker): Session factory from get_session_factory
        percentage (int): Usage percentage, 0-100
        timestamp (datetime, optional): Capture time, defaults to now (UTC)

    Returns:
        int: ID of the inserted row

    Raises:
        InvalidReadingError: If the percentage is out of range
        StorageError: If the insert fails
    """
    validate_percentage(percentage)

    session = session_factory()
    try:
        reading = PoolUsage(
            timestamp=timestamp or datetime.now(timezone.utc),
            percentage=percentage
        )
        session.add(reading)
        session.commit()
        logger.info(f"Recorded pool usage: {percentage}% (ID: {reading.id})")
        return reading.id
    except SQLAlchemyError as e:
        session.rollback()
        raise StorageError(f"error inserting data into database: {e}") from e
    finally:
        session.close()

def count_usage_readings(session_factory):
    """
    Count stored readings.
    """
    session = session_factory()
    try:
        return session.execute(select(func.count(PoolUsage.id))).scalar_one()
    except SQLAlchemyError as e:
        raise StorageError(f"error counting readings: {e}") from e
    finally:
        session.close()

def _reading_to_dict(reading):
    return {
        'id': reading.id,
        'timestamp': reading.timestamp,
        'percentage': reading.percentage
    }

def get_latest_usage(session_factory):
    """
    Get the most recent reading, or None when the table is empty.
    """
    history = get_usage_history(session_factory, limit=1)
    return history[0] if history else None

def get_usage_history(session_factory, limit=50):
    """
    Get stored readings, newest first.

    Args:
        session_factory (sessionmaker): Session factory
        limit (int, optional): Maximum rows to return, None for all

    Returns:
        list: Reading dictionaries with id, timestamp and percentage
    """
    session = session_factory()
    try:
        stmt = (
            select(PoolUsage)
            .order_by(PoolUsage.timestamp.desc(), PoolUsage.id.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        results = session.execute(stmt).scalars().all()
        return [_reading_to_dict(r) for r in results]
    except SQLAlchemyError as e:
        raise StorageError(f"error fetching usage history: {e}") from e
    finally:
        session.close()
