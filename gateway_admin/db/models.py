"""
Database Models using SQLAlchemy.

These define the storage schema for selectors and their match conditions.
They are NOT the API schemas (see gateway_admin.schemas.selector).
"""
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import declarative_base, relationship
import datetime
import uuid

Base = declarative_base()

def generate_id():
    return uuid.uuid4().hex

def utcnow():
    return datetime.datetime.now(datetime.timezone.utc)

class Selector(Base):
    __tablename__ = "selector"

    id = Column(String(128), primary_key=True, default=generate_id)
    plugin_id = Column(String(128), nullable=False, index=True)
    name = Column(String(64), nullable=False)
    match_mode = Column(Integer, nullable=False, default=0)
    type = Column(Integer, nullable=False, default=1)
    sort = Column(Integer, nullable=False, default=0)
    enabled = Column(Boolean, nullable=False, default=True)
    loged = Column(Boolean, nullable=False, default=True)
    continued = Column(Boolean, nullable=False, default=True)
    handle = Column(Text)
    date_created = Column(DateTime, default=utcnow)
    date_updated = Column(DateTime, default=utcnow, onupdate=utcnow)
    
    # Relationships
    conditions = relationship(
        "SelectorCondition",
        back_populates="selector",
        cascade="all, delete-orphan",
        order_by="SelectorCondition.position",
    )

class SelectorCondition(Base):
    __tablename__ = "selector_condition"

    id = Column(String(128), primary_key=True, default=generate_id)
    selector_id = Column(String(128), ForeignKey("selector.id", ondelete="CASCADE"), nullable=False)
    position = Column(Integer, nullable=False, default=0)
    param_type = Column(String(64))
    operator = Column(String(64))
    param_name = Column(String(64))
    param_value = Column(String(64))
    
    # Relationships
    selector = relationship("Selector", back_populates="conditions")
