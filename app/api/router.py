from fastapi import APIRouter

from app.api.routes import auth, calendar, dashboard, email, navigation, services, staff

api_router = APIRouter()

# 🔓 Public routes
api_router.include_router(auth.router)
api_router.include_router(email.router)

# 🔒 Salon owner routes (bearer token from the identity provider)
api_router.include_router(dashboard.router)
api_router.include_router(calendar.router)
api_router.include_router(services.router)
api_router.include_router(staff.router)
api_router.include_router(navigation.router)
