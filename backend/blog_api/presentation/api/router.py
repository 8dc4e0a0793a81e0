"""Top-level API router — includes versioned sub-routers.

The article routes are also mounted unversioned (``/api/articles``) so
existing clients of the original paths keep working.
"""

from fastapi import APIRouter

from blog_api.presentation.api.v1.endpoints.articles import router as articles_router
from blog_api.presentation.api.v1.router import router as v1_router

router = APIRouter(prefix="/api")
router.include_router(v1_router)
router.include_router(articles_router, include_in_schema=False)
