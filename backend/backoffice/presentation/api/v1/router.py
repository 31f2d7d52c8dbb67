"""V1 API router: aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from backoffice.presentation.api.v1.endpoints.actions import router as actions_router
from backoffice.presentation.api.v1.endpoints.articles import router as articles_router
from backoffice.presentation.api.v1.endpoints.editor import router as editor_router
from backoffice.presentation.api.v1.endpoints.health import router as health_router
from backoffice.presentation.api.v1.endpoints.session import router as session_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(articles_router)
router.include_router(session_router)
router.include_router(editor_router)
router.include_router(actions_router)
