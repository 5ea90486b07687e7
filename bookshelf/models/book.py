"""Book model."""

from sqlalchemy import Column, Integer, String

from bookshelf.database import Base
from bookshelf.models.mixins import TimestampMixin


class Book(Base, TimestampMixin):
    """Book record, optionally owned by a user."""

    __tablename__ = "books"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    author = Column(String(255), nullable=False)
    year = Column(Integer, nullable=True)
    # Plain integer, not a foreign key: orphaned owner ids are tolerated
    owner_id = Column(Integer, nullable=True, index=True)
