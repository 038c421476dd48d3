"""
Registre central des routers (API v1, admin, health).
"""
from fastapi import FastAPI
from storefront.catalog import views as catalog_views
from storefront.checkout import views as checkout_views
from storefront.admin import views as admin_views
from storefront.health.router import router as health_router

def register_routers(app: FastAPI) -> None:
    """
    Agrège tous les routers de l’application.
    - L’ordre n’a pas d’impact sauf conflits de chemins (évités par préfixes).
    """
    # API v1
    app.include_router(catalog_views.router)
    app.include_router(checkout_views.router)
    # Admin
    app.include_router(admin_views.router)
    # Health & monitoring
    app.include_router(health_router)
