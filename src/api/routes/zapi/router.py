"""Router do canal Z-API — agrega os endpoints do canal."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.zapi.manual_send import router as manual_send_router
from api.routes.zapi.webhook import router as webhook_router

router = APIRouter()

router.include_router(webhook_router)
router.include_router(manual_send_router)
