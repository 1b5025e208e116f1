from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from datetime import timedelta
from typing import Optional
from railbook.database import get_db
from railbook.auth.schemas import UserCreate, LoginRequest, AuthResponse, Profile
from railbook.auth.service import UserService, ProfileService
from railbook.auth.utils import create_access_token
from railbook.auth.dependencies import get_token_payload, require_user_id
from railbook.config import settings

router = APIRouter()

@router.post("/register", response_model=Profile, status_code=status.HTTP_201_CREATED)
def register_user(user: UserCreate, db: Session = Depends(get_db)):
    """Register a new user"""
    db_user = UserService.create_user(db=db, user=user)
    return ProfileService.get_profile(db, db_user.id)

@router.post("/login", response_model=AuthResponse)
def login(login_data: LoginRequest, db: Session = Depends(get_db)):
    """Exchange email and password for a bearer token"""
    user = UserService.authenticate_user(db, login_data.email, login_data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = create_access_token(data={"sub": user.id}, expires_delta=access_token_expires)
    return AuthResponse(
        access_token=access_token,
        token_type="bearer",
        profile=ProfileService.get_profile(db, user.id)
    )

@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(payload: Optional[dict] = Depends(get_token_payload), db: Session = Depends(get_db)):
    """Sign out; the presented token stops working"""
    if payload:
        UserService.revoke_token(db, payload["jti"])
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/me", response_model=Profile)
def read_my_profile(user_id: str = Depends(require_user_id), db: Session = Depends(get_db)):
    """Get current user profile"""
    return ProfileService.get_profile(db, user_id)
