import logging
import re

from bson import ObjectId

from toys_kingdom.models import DeleteResult, InsertResult, UpdateResult
from toys_kingdom.utils.pricing import sort_by_price

logger = logging.getLogger(__name__)

PAGE_LIMIT = 20

LISTING_PROJECTION = {
    "toy_name": 1,
    "seller_name": 1,
    "sub_category": 1,
    "price": 1,
    "quantity": 1,
}

CATEGORY_PROJECTION = {
    "toy_name": 1,
    "toy_img": 1,
    "sub_category": 1,
    "price": 1,
    "rating": 1,
}


async def search_toys(collection, text: str) -> list[dict]:
    query = {"toy_name": {"$regex": re.escape(text), "$options": "i"}}
    return await collection.find(query).limit(PAGE_LIMIT).to_list(None)


async def list_toys(collection) -> list[dict]:
    return await collection.find({}, LISTING_PROJECTION).limit(PAGE_LIMIT).to_list(None)


async def list_category_toys(collection) -> list[dict]:
    return await collection.find({}, CATEGORY_PROJECTION).to_list(None)


async def get_toy(collection, toy_id: str) -> dict | None:
    # ObjectId() raises bson.errors.InvalidId for malformed ids
    return await collection.find_one({"_id": ObjectId(toy_id)})


async def list_seller_toys(collection, email: str | None = None) -> list[dict]:
    query = {}
    if email:
        query = {"seller_email": email}
    docs = await collection.find(query).to_list(None)
    return sort_by_price(docs)


async def add_toy(collection, toy: dict) -> InsertResult:
    result = await collection.insert_one(toy)
    logger.info("Inserted toy %s", result.inserted_id)
    return InsertResult(
        acknowledged=result.acknowledged,
        inserted_id=str(result.inserted_id),
    )


async def update_toy(collection, toy_id: str, fields: dict) -> UpdateResult:
    """
    Overwrite the editable fields of a toy. Upserts, so an id with no
    document behind it ends up holding just these fields.
    """
    result = await collection.update_one(
        {"_id": ObjectId(toy_id)},
        {"$set": fields},
        upsert=True,
    )
    upserted_id = result.upserted_id
    if upserted_id is not None:
        logger.info("Upserted toy %s", upserted_id)
    else:
        logger.info(f"Updated toy {toy_id} (matched={result.matched_count}, modified={result.modified_count})")
    return UpdateResult(
        acknowledged=result.acknowledged,
        matched_count=result.matched_count,
        modified_count=result.modified_count,
        upserted_count=0 if upserted_id is None else 1,
        upserted_id=None if upserted_id is None else str(upserted_id),
    )


async def delete_toy(collection, toy_id: str) -> DeleteResult:
    result = await collection.delete_one({"_id": ObjectId(toy_id)})
    logger.info("Deleted %s toy(s) for id %s", result.deleted_count, toy_id)
    return DeleteResult(acknowledged=result.acknowledged, deleted_count=result.deleted_count)
