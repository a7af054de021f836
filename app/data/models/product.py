# app/data/models/product.py
from decimal import Decimal

from sqlalchemy import Column, Integer, Numeric, Text

from app.data.database import Base


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    price = Column(Numeric(10, 2), nullable=False, default=Decimal("0.00"))
