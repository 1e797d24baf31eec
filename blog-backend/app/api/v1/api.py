from fastapi import APIRouter

from app.api.v1.routes_blog import router as blog_router
from app.api.v1.routes_user import router as user_router


api_router = APIRouter()

api_router.include_router(user_router, prefix="/user", tags=["user"])
api_router.include_router(blog_router, prefix="/blog", tags=["blog"])
