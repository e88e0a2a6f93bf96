import logging
import os
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from dotenv import load_dotenv

load_dotenv()

from deepsleep import __version__
from deepsleep.routes import dashboard_router, records_router
from deepsleep.database import init_db, DATABASE_URL
from deepsleep.services.records import RecordStoreError

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

STATIC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "static")

# Fixed body for every server-side failure
SERVER_ERROR_PAYLOAD = {"error": "Internal Server Error"}

# Create FastAPI app
app = FastAPI(
    title="Deep Sleep",
    description="Personal sleep log",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

# Include routers
app.include_router(dashboard_router)
app.include_router(records_router)


@app.on_event("startup")
def on_startup():
    """Ensure DB is reachable and initialized at startup. If initialization
    fails the app will raise and stop with a clear error message.
    """
    try:
        init_db()
    except Exception as e:
        raise RuntimeError(
            f"Database initialization failed for DATABASE_URL={DATABASE_URL}: {e}"
        ) from e


@app.get("/health")
async def health_check():
    return {"status": "ok"}


# Error handlers
@app.exception_handler(RecordStoreError)
async def record_store_error_handler(request: Request, exc: RecordStoreError):
    """Store failures: generic 500, no retry."""
    return JSONResponse(status_code=500, content=SERVER_ERROR_PAYLOAD)


@app.exception_handler(Exception)
async def server_error_handler(request: Request, exc: Exception):
    """Handle 500 errors."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content=SERVER_ERROR_PAYLOAD)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("deepsleep.main:app", host="0.0.0.0", port=int(os.getenv("PORT", "3001")), reload=True)
