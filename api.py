import uvicorn
import logging
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from src import config
from src.door_manager import DoorManager
from src.logger import configure_logging
from src.api.routes.doors import router as doors_router
from src.api.routes.health import router as health_router
from src.api.routes.fallback import router as fallback_router
from src.api.exceptions import configure_exception_handlers

app_logger = logging.getLogger("api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(app.state.logs_dir)
    app_logger.info(
        f"Application startup: door closed, auto-close after {app.state.door_manager.open_duration}s"
    )
    yield
    app_logger.info("Application shutdown: cancelling door timer...")
    app.state.door_manager.shutdown()


def create_app(
    door_manager: Optional[DoorManager] = None,
    public_dir: str = config.PUBLIC_DIR,
    logs_dir: str = config.LOGS_DIR,
) -> FastAPI:
    app = FastAPI(lifespan=lifespan)
    app.state.door_manager = door_manager or DoorManager()
    app.state.public_dir = public_dir
    app.state.logs_dir = logs_dir

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(doors_router)
    app.include_router(health_router)
    # Catch-all, must stay last
    app.include_router(fallback_router)

    configure_exception_handlers(app)
    return app


app = create_app()

if __name__ == "__main__":
    app_logger.info(f"Door status server listening at http://{config.API_HOST}:{config.PORT}")
    # One worker: the door state lives in this process
    uvicorn.run(app, host=config.API_HOST, port=config.PORT)
