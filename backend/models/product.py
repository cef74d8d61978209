# backend/models/product.py
from sqlalchemy import Column, Integer, String
from database import Base

# Model Product
# Pojedyncza pozycja w magazynie: nazwa oraz miejsce składowania
# (kontener, strona, półka) i stan ilościowy.
# Kontener i strona nie są tu ograniczane do zbioru z formularza.
class Product(Base):
    __tablename__ = "products"
    # AUTOINCREMENT: ids of deleted rows are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)

    # Lokalizacja
    container = Column(Integer, nullable=False)
    side = Column(String, nullable=False)
    shelf = Column(Integer, nullable=False)

    quantity = Column(Integer, default=0, server_default="0")
