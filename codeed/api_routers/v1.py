from fastapi import APIRouter

from codeed.features.accounts.routes.accounts import router as accounts_router
from codeed.features.articles.routes.articles import router as articles_router
from codeed.features.auth.routes.auth import router as auth_router
from codeed.features.courses.routes.courses import router as courses_router
from codeed.features.files.routes.files import router as files_router
from codeed.features.users.routes.users import router as users_router

api_router = APIRouter()

# Register all feature routes
api_router.include_router(auth_router)
api_router.include_router(users_router)
api_router.include_router(courses_router)
api_router.include_router(articles_router)
api_router.include_router(accounts_router)
api_router.include_router(files_router)
