import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from sqlalchemy.exc import OperationalError

from app.api.routes import router as api_router
from app.core.config import settings
from app.db.database import Base, engine
from app.models.dataset import DistrictData  # noqa: F401  (registers the table)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Try to create tables (safe)
    try:
        Base.metadata.create_all(bind=engine)
    except OperationalError:
        logger.exception("Database connection failed")
    logger.info("Serving static files from: %s", settings.STATIC_DIR)
    yield


app = FastAPI(title="MGNREGA District Records API", version="1.0", lifespan=lifespan)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include your API routes
app.include_router(api_router)


# Single-page app: registered last so every API route above wins
@app.get("/{full_path:path}", include_in_schema=False)
def spa(full_path: str):
    if full_path.startswith("api"):
        raise HTTPException(status_code=404, detail="Not Found")

    static_dir = settings.STATIC_DIR.resolve()
    if full_path:
        candidate = (static_dir / full_path).resolve()
        if candidate.is_file() and static_dir in candidate.parents:
            return FileResponse(candidate)

    index = static_dir / "index.html"
    if not index.is_file():
        raise HTTPException(status_code=404, detail="Frontend build not found")
    return FileResponse(index)


def run():
    import uvicorn

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Server is running on http://localhost:%d", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
