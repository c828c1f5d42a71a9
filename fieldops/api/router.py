"""
Main API router
"""
from fastapi import APIRouter

from fieldops.api.v1 import (
    attendance,
    auth,
    distance,
    employees,
    health,
    location,
    payroll,
    services,
    version,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(version.router, tags=["version"])
api_router.include_router(auth.router, prefix="/auth", tags=["authentication"])
api_router.include_router(employees.router, prefix="/employees", tags=["employees"])
api_router.include_router(attendance.router, prefix="/attendance", tags=["attendance"])
api_router.include_router(location.router, prefix="/location", tags=["location"])
api_router.include_router(distance.router, prefix="/distance", tags=["distance"])
api_router.include_router(payroll.router, prefix="/payroll", tags=["payroll"])
api_router.include_router(services.router, prefix="/services", tags=["services"])
