# product_service/models.py

"""
SQLAlchemy database models for the Product Service.
"""

from sqlalchemy import Column, Float, Integer, String, Text

from .db import Base

NAME_MAX_LENGTH = 100


class Product(Base):
    """
    SQLAlchemy model for the 'products' table.
    """

    __tablename__ = "products"
    # Keeps SQLite from reusing the ids of deleted rows
    __table_args__ = {"sqlite_autoincrement": True}

    # Assigned by the store on insert, never changed afterwards.
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    name = Column(String(NAME_MAX_LENGTH), nullable=False)

    description = Column(Text, nullable=True)

    price = Column(Float, nullable=False)

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', price={self.price})>"
