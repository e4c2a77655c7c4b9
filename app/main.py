from dotenv import load_dotenv
load_dotenv()

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.router import api_router
from app.core.config import settings
from app.core.supabase_client import DataStoreConfigError, DataStoreError


#Configure logging once for the whole process
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logging.getLogger("urllib3").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


#Create application instance
app = FastAPI(title="SalonBooker Admin API")


#configure CORS for the admin frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


#Backend misconfiguration: nothing can be read or written
@app.exception_handler(DataStoreConfigError)
async def datastore_config_exception_handler(request: Request, exc: DataStoreConfigError):
    logger.error("Backend not configured: %s", exc.message)
    return JSONResponse({"detail": exc.message}, status_code=503)


#Pass backend errors through; client errors keep their status, the rest become 502
@app.exception_handler(DataStoreError)
async def datastore_exception_handler(request: Request, exc: DataStoreError):
    status_code = exc.status_code if exc.status_code and 400 <= exc.status_code < 500 else 502
    return JSONResponse({"detail": exc.message}, status_code=status_code)


#Register all API routes under the main application
app.include_router(api_router)
