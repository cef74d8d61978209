# backend/utils/product_store.py
import logging
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional, Sequence

from sqlalchemy import func
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config import LOW_STOCK_THRESHOLD
from database import Base, make_engine, make_session_factory
from models.product import Product
from schemas.product import ProductForm, ProductOut

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Any failure of the underlying database."""


class ProductStore:
    """All reads and writes of the products table.

    Every call opens its own short session and returns detached
    ProductOut objects, so callers never hold a connection.
    """

    # Columns allowed in list_all(order_by=...)
    ORDER_COLUMNS = {
        "id": Product.id,
        "name": Product.name,
        "container": Product.container,
        "side": Product.side,
        "shelf": Product.shelf,
        "quantity": Product.quantity,
    }

    def __init__(self, engine: Engine):
        self.engine = engine
        self._session_factory = make_session_factory(engine)

    @classmethod
    def from_url(cls, database_url: str) -> "ProductStore":
        return cls(make_engine(database_url))

    # ---- HELPERS ----
    @contextmanager
    def _session(self) -> Iterator[Session]:
        db = self._session_factory()
        try:
            yield db
        except (SQLAlchemyError, OverflowError) as e:
            # OverflowError: the driver cannot bind an int outside 64 bits
            db.rollback()
            logger.exception("Database error: %s", e)
            raise StorageError(str(e)) from e
        finally:
            db.close()

    @staticmethod
    def _out(rows: Sequence[Product]) -> List[ProductOut]:
        return [ProductOut.model_validate(p) for p in rows]

    # =========================
    # SCHEMAT
    # =========================
    def ensure_schema(self) -> bool:
        """Create the products table if it does not exist yet.

        Failures are logged and reported through the return value; the
        application keeps starting and later queries fail on their own.
        """
        try:
            Base.metadata.create_all(bind=self.engine, tables=[Product.__table__])
        except SQLAlchemyError:
            logger.exception("Table creation error")
            return False
        logger.info("Connected to SQLite database at %s", self.engine.url)
        return True

    def dispose(self) -> None:
        self.engine.dispose()

    # =========================
    # ODCZYT
    # =========================
    def list_all(self, order_by: Sequence[str] = ("container", "shelf")) -> List[ProductOut]:
        cols = [self.ORDER_COLUMNS[c] for c in order_by if c in self.ORDER_COLUMNS]
        with self._session() as db:
            return self._out(db.query(Product).order_by(*cols).all())

    def list_by_container(self, container_id: Optional[int]) -> List[ProductOut]:
        if container_id is None:
            return []
        with self._session() as db:
            rows = (
                db.query(Product)
                .filter(Product.container == container_id)
                .order_by(Product.shelf)
                .all()
            )
            return self._out(rows)

    def list_low_stock(self, threshold: int = LOW_STOCK_THRESHOLD) -> List[ProductOut]:
        with self._session() as db:
            rows = (
                db.query(Product)
                .filter(Product.quantity <= threshold)
                .order_by(Product.container, Product.shelf)
                .all()
            )
            return self._out(rows)

    def search(self, term: str) -> List[ProductOut]:
        # LIKE keeps SQLite's default matching (ASCII case-insensitive)
        with self._session() as db:
            rows = db.query(Product).filter(Product.name.like(f"%{term}%")).all()
            return self._out(rows)

    def get_by_id(self, product_id: Optional[int]) -> Optional[ProductOut]:
        if product_id is None:
            return None
        with self._session() as db:
            product = db.query(Product).filter(Product.id == product_id).first()
            return ProductOut.model_validate(product) if product else None

    # =========================
    # ZAPIS
    # =========================
    def insert(self, form: ProductForm) -> ProductOut:
        with self._session() as db:
            product = Product(**form.model_dump())
            db.add(product)
            db.commit()
            db.refresh(product)
            return ProductOut.model_validate(product)

    def update(self, product_id: Optional[int], form: ProductForm) -> Optional[ProductOut]:
        if product_id is None:
            return None
        with self._session() as db:
            product = db.query(Product).filter(Product.id == product_id).first()
            if not product:
                return None

            for key, value in form.model_dump().items():
                setattr(product, key, value)

            db.commit()
            db.refresh(product)
            return ProductOut.model_validate(product)

    def delete_by_id(self, product_id: Optional[int]) -> bool:
        if product_id is None:
            return False
        with self._session() as db:
            deleted = db.query(Product).filter(Product.id == product_id).delete()
            db.commit()
            return deleted > 0

    def clear(self) -> int:
        with self._session() as db:
            deleted = db.query(Product).delete()
            db.commit()
            return deleted

    # =========================
    # STATYSTYKI
    # =========================
    def count_total(self) -> int:
        with self._session() as db:
            return db.query(Product).count()

    def count_by_container(self) -> Dict[int, int]:
        with self._session() as db:
            rows = (
                db.query(Product.container, func.count(Product.id).label("count"))
                .group_by(Product.container)
                .order_by(Product.container)
                .all()
            )
            return {row.container: row.count for row in rows}

    def count_low_stock(self, threshold: int = LOW_STOCK_THRESHOLD) -> int:
        with self._session() as db:
            return db.query(Product).filter(Product.quantity <= threshold).count()
