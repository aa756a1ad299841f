import os

import fakeredis
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set testing environment before the app reads its settings
os.environ["TESTING"] = "1"
os.environ["TEST_DATABASE_URL"] = "sqlite:///./test.db"

from app.main import app  # noqa: E402
from app.core.database import get_db, get_redis, Base  # noqa: E402
from app.models.appointment import Appointment  # noqa: E402
from app.models.user import User  # noqa: E402

# Create test database
SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(
    SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False}
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def override_get_db():
    try:
        db = TestingSessionLocal()
        yield db
    finally:
        db.close()

app.dependency_overrides[get_db] = override_get_db

@pytest.fixture(scope="function")
def test_db():
    # Create tables
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture
def fake_redis():
    redis_client = fakeredis.FakeRedis(decode_responses=True)
    app.dependency_overrides[get_redis] = lambda: redis_client
    yield redis_client
    app.dependency_overrides.pop(get_redis, None)

@pytest.fixture
def client(test_db, fake_redis):
    with TestClient(app, base_url="http://testserver") as test_client:
        yield test_client

@pytest.fixture
def db_session(test_db):
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

@pytest.fixture
def seeded(db_session):
    """A user, a doctor and ten appointments between them."""
    user = User(name="Ada Obi")
    doctor = User(name="Dr. Bayo", is_doctor=True, office_address="11, Adewale close, Lagos")
    db_session.add_all([user, doctor])
    db_session.commit()

    appointments = [
        Appointment(
            title=f"Check-up {i}",
            description="Routine visit",
            user_id=user.id,
            doctor_id=doctor.id
        )
        for i in range(10)
    ]
    db_session.add_all(appointments)
    db_session.commit()

    ids = {
        "user_id": user.id,
        "doctor_id": doctor.id,
        "appointment_id": appointments[0].id,
        "appointment_ids": [a.id for a in appointments],
    }
    # Later reads must see what the API wrote, not cached rows
    db_session.expunge_all()
    return ids
