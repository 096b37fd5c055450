from fastapi import APIRouter

from src.pitchdesk.api.v1 import organizations, pitches, songs

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(organizations.router)
api_router.include_router(songs.router)
api_router.include_router(pitches.router)
