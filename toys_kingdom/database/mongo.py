import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo import ASCENDING
from pymongo.server_api import ServerApi

from toys_kingdom.config import settings

logger = logging.getLogger(__name__)

DB_NAME = "toysDB"
TOYS_COLLECTION = "toys"
TITLE_INDEX = "titleSearch"
MAX_POOL_SIZE = 10

client: AsyncIOMotorClient | None = None


def connect(uri: str | None = None) -> AsyncIOMotorClient:
    """
    Create the process-wide client. Motor connects lazily: servers are only
    contacted on the first command, though a mongodb+srv URI may resolve its
    DNS records here.
    """
    global client
    client = AsyncIOMotorClient(
        uri or settings.mongo_uri,
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
        maxPoolSize=MAX_POOL_SIZE,
    )
    return client


def close() -> None:
    global client
    if client is not None:
        client.close()
        client = None
        logger.info("MongoDB client closed")


def get_toys_collection() -> AsyncIOMotorCollection:
    if client is None:
        raise RuntimeError("MongoDB client is not connected")
    return client[DB_NAME][TOYS_COLLECTION]


async def ping() -> None:
    await client.admin.command({"ping": 1})
    logger.info("Pinged your deployment. You successfully connected to MongoDB!")


async def ensure_indexes(collection) -> str:
    # create_index is a no-op when an identical index already exists
    name = await collection.create_index([("toy_name", ASCENDING)], name=TITLE_INDEX)
    logger.info(f"Index '{name}' ready on {collection.name}")
    return name
