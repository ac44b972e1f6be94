"""Top-level API router — aggregates every endpoint router under /api."""

from fastapi import APIRouter

from aion.presentation.api.endpoints.health import router as health_router
from aion.presentation.api.endpoints.auth import router as auth_router
from aion.presentation.api.endpoints.users import router as users_router
from aion.presentation.api.endpoints.life_domains import router as life_domains_router
from aion.presentation.api.endpoints.events import router as events_router
from aion.presentation.api.endpoints.moods import router as moods_router
from aion.presentation.api.endpoints.transactions import router as transactions_router
from aion.presentation.api.endpoints.goals import router as goals_router
from aion.presentation.api.endpoints.contacts import router as contacts_router
from aion.presentation.api.endpoints.insights import router as insights_router
from aion.presentation.api.endpoints.ai import router as ai_router
from aion.presentation.api.endpoints.dashboard import router as dashboard_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(auth_router)
router.include_router(users_router)
router.include_router(life_domains_router)
router.include_router(events_router)
router.include_router(moods_router)
router.include_router(transactions_router)
router.include_router(goals_router)
router.include_router(contacts_router)
router.include_router(insights_router)
router.include_router(ai_router)
router.include_router(dashboard_router)
