# warm_admin/models/base.py
"""
Declarative base and shared timestamp columns.
"""
from datetime import datetime
from sqlalchemy import Column, DateTime
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class TimestampMixin:
    """
    Provides:
    - created_at: Auto timestamp on creation
    - updated_at: Auto timestamp on updates (ORM and Core UPDATE statements)
    """
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
