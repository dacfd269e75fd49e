from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from inventory_tracker import __version__
from inventory_tracker.core.config import settings
from inventory_tracker.common.error_handlers import register_error_handlers
from inventory_tracker.api.v1 import inventory


def create_app() -> FastAPI:
    app = FastAPI(title="Restaurant Inventory Tracker", version=__version__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Register API routers
    app.include_router(
        inventory.router, prefix="/api/inventory", tags=["inventory"])

    @app.get("/")
    def read_root():
        return {"message": "Welcome to the Restaurant Inventory Tracker API!"}

    return app


app = create_app()
