import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import random
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from railbook.auth.schemas import UserCreate
from railbook.auth.service import UserService
from railbook.database import Base, SessionLocal, engine
from railbook.main import app
from railbook.models import Train


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    return TestClient(app)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_train(db):
    def _make_train(train_number, source, destination, base_fare="1000.00", classes=None, **extra):
        train = Train(
            train_number=train_number,
            train_name=extra.pop("train_name", f"Express {train_number}"),
            source_station=source,
            destination_station=destination,
            departure_time=extra.pop("departure_time", "16:55"),
            arrival_time=extra.pop("arrival_time", "09:55"),
            duration=extra.pop("duration", "17h 00m"),
            base_fare=Decimal(base_fare),
            available_classes=classes if classes is not None else {"sleeper": True, "3ac": True},
            **extra
        )
        db.add(train)
        db.commit()
        db.refresh(train)
        return train
    return _make_train


@pytest.fixture
def trains(make_train):
    """A small timetable keyed by train number"""
    return {
        "12301": make_train("12301", "New Delhi", "Howrah Junction", "1000.00", {"sleeper": True, "3ac": True}),
        "12002": make_train("12002", "New Delhi", "Bhopal Junction", "450.00", {"sleeper": True, "3ac": True, "2ac": False}),
        "12951": make_train("12951", "Mumbai Central", "New Delhi", "950.00", {"3ac": True, "2ac": True, "1ac": True}),
        "12627": make_train("12627", "KSR Bengaluru", "Old Delhi Junction", "650.00",
                            {"sleeper": True, "3ac": True, "2ac": True, "1ac": True}),
    }


@pytest.fixture
def user(db):
    return UserService.create_user(db, UserCreate(
        full_name="Asha Verma",
        email="asha@example.com",
        password="secret123",
        phone="9876543210"
    ))


@pytest.fixture
def auth_headers(client):
    client.post("/api/v1/auth/register", json={
        "full_name": "Ravi Kumar",
        "email": "ravi@example.com",
        "password": "secret123"
    })
    response = client.post("/api/v1/auth/login", json={
        "email": "ravi@example.com",
        "password": "secret123"
    })
    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}
