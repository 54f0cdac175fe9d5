"""Declarative base shared by all ORM models."""

import uuid

from sqlalchemy.orm import declarative_base

Base = declarative_base()


def new_id() -> str:
    """Primary key generator for string ids."""
    return str(uuid.uuid4())
