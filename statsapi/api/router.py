from fastapi import APIRouter
from statsapi.api.endpoints import database, statistics

api_router = APIRouter()

# Combine all sub-routers into one
api_router.include_router(statistics.router)
api_router.include_router(database.router)
