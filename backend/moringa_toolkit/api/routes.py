from fastapi import APIRouter
from . import hello, pages
from ..core.config import settings

api_router = APIRouter(prefix=settings.API_PREFIX)
api_router.include_router(hello.router)

root_router = APIRouter()
root_router.include_router(pages.router)
root_router.include_router(api_router)
