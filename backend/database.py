import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import Request

from .notifier import SmsNotifier
from .store import CatalogStore, OrderStore

env_path = Path(__file__).parent / '.env'
load_dotenv(dotenv_path=env_path)

DATA_DIR = Path(os.getenv("DATA_DIR", Path(__file__).parent))
PORT = int(os.getenv("PORT", 5000))


class DataPaths:
    def __init__(self, data_dir=None):
        root = Path(data_dir) if data_dir is not None else DATA_DIR
        self.products_file = root / "products.json"
        self.orders_file = root / "orders.json"
        self.uploads_dir = root / "uploads"


def init_storage(app, data_dir=None, notifier=None):
    """Create the stores (bootstrapping missing files) and hang them on app.state."""
    paths = DataPaths(data_dir)
    paths.uploads_dir.mkdir(parents=True, exist_ok=True)

    app.state.paths = paths
    app.state.catalog_store = CatalogStore(paths.products_file)
    app.state.order_store = OrderStore(paths.orders_file)
    app.state.notifier = notifier if notifier is not None else SmsNotifier.from_env()
    return paths


# --- Dependencies ---

def get_catalog_store(request: Request) -> CatalogStore:
    return request.app.state.catalog_store


def get_order_store(request: Request) -> OrderStore:
    return request.app.state.order_store


def get_notifier(request: Request) -> SmsNotifier:
    return request.app.state.notifier


def get_uploads_dir(request: Request) -> Path:
    return request.app.state.paths.uploads_dir
