from fastapi import APIRouter
from app.api.routes.auth import router as auth_router
from app.api.routes.reports import router as reports_router
from app.api.routes.authority import router as authority_router
from app.api.routes.chat import router as chat_router

api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(reports_router, prefix="/reports", tags=["reports"])
api_router.include_router(authority_router, prefix="/authority", tags=["🏛️ Authority"])
api_router.include_router(chat_router, prefix="/chat", tags=["🤖 Assistant"])
