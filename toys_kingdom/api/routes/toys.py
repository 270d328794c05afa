from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorCollection

from toys_kingdom.database.mongo import get_toys_collection
from toys_kingdom.models import DeleteResult, InsertResult, Toy, ToyUpdate, UpdateResult
from toys_kingdom.services import toy_service
from toys_kingdom.utils.serialization import serialize_doc, serialize_docs

router = APIRouter()


@router.get("/toySearch/{text}")
async def search_toys(text: str, toys: AsyncIOMotorCollection = Depends(get_toys_collection)):
    docs = await toy_service.search_toys(toys, text)
    return serialize_docs(docs)


@router.get("/alltoys")
async def all_toys(toys: AsyncIOMotorCollection = Depends(get_toys_collection)):
    docs = await toy_service.list_toys(toys)
    return serialize_docs(docs)


@router.get("/category-toys")
async def category_toys(toys: AsyncIOMotorCollection = Depends(get_toys_collection)):
    docs = await toy_service.list_category_toys(toys)
    return serialize_docs(docs)


@router.get("/toy/{toy_id}")
async def toy_details(toy_id: str, toys: AsyncIOMotorCollection = Depends(get_toys_collection)):
    doc = await toy_service.get_toy(toys, toy_id)
    return serialize_doc(doc)


@router.get("/my-toys")
async def my_toys(email: str | None = None, toys: AsyncIOMotorCollection = Depends(get_toys_collection)):
    docs = await toy_service.list_seller_toys(toys, email)
    return serialize_docs(docs)


@router.post("/add-toy", response_model=InsertResult)
async def add_toy(toy: Toy, toys: AsyncIOMotorCollection = Depends(get_toys_collection)):
    return await toy_service.add_toy(toys, toy.model_dump(exclude_unset=True))


@router.put("/my-toys/{toy_id}", response_model=UpdateResult)
async def update_toy(toy_id: str, changes: ToyUpdate, toys: AsyncIOMotorCollection = Depends(get_toys_collection)):
    # every editable field is written; ones missing from the body become null
    return await toy_service.update_toy(toys, toy_id, changes.model_dump())


@router.delete("/my-toys/{toy_id}", response_model=DeleteResult)
async def delete_toy(toy_id: str, toys: AsyncIOMotorCollection = Depends(get_toys_collection)):
    return await toy_service.delete_toy(toys, toy_id)
