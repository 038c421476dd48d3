"""
ASGI entrypoint: expose `app` for process managers / deployments.

- En production, un process manager (ex: gunicorn/uvicorn-workers) importe `storefront.asgi:app`.
- Toute la configuration FastAPI est centralisée dans storefront.app_setup, ce fichier ne fait
  qu’exposer l’instance `app`.
"""

from storefront.app import app

if __name__ == "__main__":
    import os
    import uvicorn
    uvicorn.run(
        "storefront.asgi:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8000")),
        reload=True,     # rechargement automatique en dev
    )
