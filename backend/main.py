import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from . import api_catalog, api_orders
from .database import PORT, init_storage
from .intake import IntakeFailed
from .store import StoreUnavailable
from .uploads import UPLOADS_URL_PREFIX, UploadFailed

logger = logging.getLogger(__name__)

PUBLIC_DIR = Path(__file__).parent / "public"


def create_app(data_dir=None, notifier=None) -> FastAPI:
    app = FastAPI(title="Dairy Delivery Storefront")

    # Stores are built once here and reached through app.state by the routers
    paths = init_storage(app, data_dir=data_dir, notifier=notifier)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_catalog.router)
    app.include_router(api_orders.router)

    # --- Error responses ---

    @app.exception_handler(IntakeFailed)
    def intake_failed(request: Request, exc: IntakeFailed):
        return JSONResponse(status_code=503, content={"message": f"❌ Order not placed: {exc.reason}"})

    @app.exception_handler(StoreUnavailable)
    def store_unavailable(request: Request, exc: StoreUnavailable):
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
        return JSONResponse(status_code=503, content={"message": f"❌ Storage unavailable: {exc.reason}"})

    @app.exception_handler(UploadFailed)
    def upload_failed(request: Request, exc: UploadFailed):
        return JSONResponse(status_code=500, content={"message": f"❌ Image upload failed: {exc}"})

    # --- Static: uploaded images, then the storefront/admin page at / ---
    app.mount(UPLOADS_URL_PREFIX, StaticFiles(directory=paths.uploads_dir), name="uploads")
    app.mount("/", StaticFiles(directory=PUBLIC_DIR, html=True), name="public")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    logger.info(f"✅ Server running at http://localhost:{PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
