from typing import Dict, Any
from .repository import get_user_from_access_token as _repo_get_user_from_token

def determine_role(app_metadata: Dict[str, Any] | None) -> str:
    """Rôle lu dans app_metadata (jamais user_metadata, que l'utilisateur peut réécrire)."""
    role_lower = str((app_metadata or {}).get("role", "")).lower()
    if role_lower == "admin":
        return "admin"
    return "user"

def get_user_from_token(access_token: str) -> Dict[str, Any]:
    """Normalise l'utilisateur issu de supabase.auth.get_user(access_token):
    - Retourne {id, email, metadata, app_metadata, role, token}
    - Les erreurs GoTrue (jeton expiré, révoqué, malformé) remontent telles quelles à l'appelant
    """
    raw = _repo_get_user_from_token(access_token)
    metadata = raw.get("user_metadata") or {}
    app_metadata = raw.get("app_metadata") or {}
    return {
        "id": raw.get("id"),
        "email": raw.get("email"),
        "metadata": metadata,
        "app_metadata": app_metadata,
        "role": determine_role(app_metadata),
        "token": access_token,
    }
