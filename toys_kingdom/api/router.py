from fastapi import APIRouter
from toys_kingdom.api.routes import toys

api_router = APIRouter()

api_router.include_router(toys.router, tags=["Toys"])
