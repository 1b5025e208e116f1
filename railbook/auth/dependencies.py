from typing import Optional
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from railbook.config import settings
from railbook.database import get_db
from railbook.auth.utils import decode_token
from railbook.auth.service import UserService
from railbook.exceptions import AuthenticationRequired

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_V1_STR}/auth/login", auto_error=False)

def get_token_payload(token: Optional[str] = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> Optional[dict]:
    """Payload of a valid, unrevoked bearer token, or None"""
    if not token:
        return None
    payload = decode_token(token)
    if payload is None or UserService.is_token_revoked(db, payload.get("jti")):
        return None
    if UserService.get_user_by_id(db, payload["sub"]) is None:
        return None
    return payload

def get_current_user_id(payload: Optional[dict] = Depends(get_token_payload)) -> Optional[str]:
    """Id of the signed-in user, or None when nobody is signed in"""
    return payload["sub"] if payload else None

def require_user_id(user_id: Optional[str] = Depends(get_current_user_id)) -> str:
    """Like get_current_user_id, but fails with AuthenticationRequired"""
    if not user_id:
        raise AuthenticationRequired()
    return user_id
