from fastapi import APIRouter
from app.api.v1.auth import router as auth_router
from app.api.v1.users import router as users_router
from app.api.v1.trainees import router as trainees_router
from app.api.v1.progress import router as progress_router
from app.api.v1.belt_progress import router as belt_progress_router
from app.api.v1.sessions import router as sessions_router
from app.api.v1.forum import router as forum_router
from app.api.v1.resources import router as resources_router

api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth")
api_router.include_router(users_router)
api_router.include_router(trainees_router)
api_router.include_router(progress_router)
api_router.include_router(belt_progress_router)
api_router.include_router(sessions_router)
api_router.include_router(forum_router)
api_router.include_router(resources_router)
