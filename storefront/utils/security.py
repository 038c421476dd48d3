from fastapi import Request, HTTPException, Depends
from typing import Optional, Dict, Any

BEARER_PREFIX = "Bearer "

def get_bearer_token(request: Request) -> Optional[str]:
    """
    Extrait le jeton de l'en-tête Authorization.
    - None si l'en-tête est absent ou vide (aucun identifiant fourni)
    - "" si l'en-tête est présent mais n'est pas au format Bearer (identifiant invalide)
    """
    auth_header = (request.headers.get("Authorization") or "").strip()
    if not auth_header:
        return None
    if not auth_header.startswith(BEARER_PREFIX):
        return ""
    return auth_header[len(BEARER_PREFIX):].strip()

def get_current_user(request: Request) -> Dict[str, Any]:
    token = get_bearer_token(request)
    if token is None:
        raise HTTPException(status_code=401, detail="Non authentifié")
    if not token:
        raise HTTPException(status_code=401, detail="Session expirée, veuillez vous connecter")

    try:
        # Délégué au service Auth
        from storefront.auth.service import get_user_from_token as _svc_get_user_from_token
        user = _svc_get_user_from_token(token)
        if not user.get("id"):
            raise HTTPException(status_code=401, detail="Session expirée, veuillez vous connecter")
        return user
    except HTTPException:
        raise
    except Exception:
        raise HTTPException(status_code=401, detail="Session expirée, veuillez vous connecter")

def require_user(user: Dict[str, Any] = Depends(get_current_user)) -> Dict[str, Any]:
    return user

def require_admin(user: Dict[str, Any] = Depends(get_current_user)) -> Dict[str, Any]:
    if user.get("role") != "admin":
        raise HTTPException(status_code=403, detail="Accès interdit")
    return user
