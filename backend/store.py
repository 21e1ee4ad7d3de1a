"""
Flat-file JSON stores for the catalog and the order log.

Every call reads or writes the whole document. Writes go through a temp file
and ``os.replace`` so a reader never sees a half-written file, but there is no
locking: two requests doing read-modify-write on the same file at once can
lose one of the updates (last writer wins).
"""
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Generic, List, Sequence, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from .models import Order, Product
from .seed_data import SEED_PRODUCTS

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class StoreUnavailable(Exception):
    """Backing file could not be read, parsed or written."""

    def __init__(self, path, reason):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path.name}: {reason}")


class JsonListStore(Generic[T]):
    model: Type[T]

    def __init__(self, path, seed=None):
        self.path = Path(path)
        self._adapter = TypeAdapter(List[self.model])
        if not self.path.exists():
            self._bootstrap(seed or [])

    def _bootstrap(self, seed):
        logger.info(f"Initialising {self.path} with {len(seed)} record(s)")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._write(seed)

    def load_all(self) -> List[T]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise StoreUnavailable(self.path, f"cannot read: {e.strerror or e}") from e
        except UnicodeDecodeError as e:
            raise StoreUnavailable(self.path, f"not valid UTF-8 at byte {e.start}") from e
        try:
            return self._adapter.validate_json(raw)
        except ValidationError as e:
            # malformed JSON is reported by pydantic as a validation error too
            raise StoreUnavailable(self.path, f"corrupt contents ({e.error_count()} error(s))") from e

    def append(self, record: T) -> None:
        # unguarded read-modify-write, see module docstring
        records = self.load_all()
        records.append(record)
        self._write([r.model_dump() for r in records])

    def _write(self, data) -> None:
        try:
            fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(data, fh, indent=2, ensure_ascii=False)
                os.replace(tmp, self.path)
            except BaseException:
                if os.path.exists(tmp):
                    os.unlink(tmp)
                raise
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Write to {self.path} failed: {e}")
            raise StoreUnavailable(self.path, f"cannot write: {e}") from e


class CatalogStore(JsonListStore[Product]):
    model = Product

    def __init__(self, path):
        super().__init__(path, seed=SEED_PRODUCTS)

    def replace_all(self, products: Sequence[Product]) -> None:
        """Overwrite the whole catalog. Products left out are deleted."""
        self._write([p.model_dump() for p in products])


class OrderStore(JsonListStore[Order]):
    """Append-only order log. Orders are never updated or removed here."""

    model = Order
