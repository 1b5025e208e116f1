import logging
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from railbook.models import User, Profile, RevokedToken
from railbook.auth.schemas import UserCreate
from railbook.auth.utils import get_password_hash, verify_password
from railbook.exceptions import NotFound, ValidationError
from typing import Optional

logger = logging.getLogger(__name__)

class UserService:
    @staticmethod
    def get_user_by_email(db: Session, email: str) -> Optional[User]:
        """Get user by email"""
        return db.query(User).filter(User.email == email.lower()).first()

    @staticmethod
    def get_user_by_id(db: Session, user_id: str) -> Optional[User]:
        """Get user by ID"""
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    def create_user(db: Session, user: UserCreate) -> User:
        """Create a user together with their profile"""
        db_user = User(
            email=user.email.lower(),
            password=get_password_hash(user.password)
        )

        try:
            db.add(db_user)
            db.flush()

            db.add(Profile(
                id=db_user.id,
                full_name=user.full_name.strip(),
                email=db_user.email,
                phone=user.phone
            ))

            db.commit()
            db.refresh(db_user)
            logger.info("Registered user %s", db_user.id)
            return db_user

        except IntegrityError:
            db.rollback()
            raise ValidationError("Email already registered")

    @staticmethod
    def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
        """Authenticate user with email and password"""
        user = UserService.get_user_by_email(db, email)
        if not user:
            return None
        if not verify_password(password, user.password):
            return None
        return user

    @staticmethod
    def revoke_token(db: Session, jti: str) -> None:
        """Sign out by remembering the token id as revoked"""
        if not db.get(RevokedToken, jti):
            db.add(RevokedToken(jti=jti))
            db.commit()

    @staticmethod
    def is_token_revoked(db: Session, jti: Optional[str]) -> bool:
        return bool(jti) and db.get(RevokedToken, jti) is not None

class ProfileService:
    @staticmethod
    def get_profile(db: Session, user_id: str) -> Profile:
        profile = db.query(Profile).filter(Profile.id == user_id).first()
        if not profile:
            raise NotFound("Profile not found")
        return profile
