import logging
from contextlib import asynccontextmanager

from bson.errors import InvalidId
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pymongo.errors import PyMongoError

from toys_kingdom.api.router import api_router
from toys_kingdom.config import settings
from toys_kingdom.database import mongo

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    mongo.connect()
    try:
        await mongo.ping()
        await mongo.ensure_indexes(mongo.get_toys_collection())
    except PyMongoError as e:
        # keep serving; requests will surface the store error themselves
        logger.error(f"MongoDB startup check failed: {e}")
    try:
        yield
    finally:
        mongo.close()


app = FastAPI(title="Toys Kingdom Server", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidId)
@app.exception_handler(PyMongoError)
async def store_error_handler(request: Request, exc: Exception):
    logger.error("%s %s failed", request.method, request.url.path, exc_info=exc)
    return PlainTextResponse("Internal Server Error", status_code=500)


app.include_router(api_router)


@app.get("/", response_class=PlainTextResponse)
def root():
    return "Toys kingdom server is running"
