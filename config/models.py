"""
SQLAlchemy ORM Models
"""

from sqlalchemy import Column, Integer, DateTime
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()

class PoolUsage(Base):
    __tablename__ = 'pool_usage'

    id = Column(Integer, primary_key=True, autoincrement=True)
    timestamp = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    percentage = Column(Integer, nullable=False)

    def __repr__(self):
        return f"<PoolUsage id={self.id} timestamp={self.timestamp} percentage={self.percentage}%>"
