import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.dependencies import get_db
from app.core.security import create_access_token
from app.db.base import enable_sqlite_foreign_keys
from app.db.storage import StorageAdapter
from app.main import app
from app.models import Base
from app.schemas.mcq import ChoiceCreate, MCQCreate
from app.services.attempt_recorder import AttemptRecorder
from app.services.mcq_repository import MCQRepository

OWNER = "user-1"
OTHER = "user-2"


@pytest.fixture
def engine():
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(test_engine)
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def storage(db):
    return StorageAdapter(db)


@pytest.fixture
def repository(storage):
    return MCQRepository(storage)


@pytest.fixture
def recorder(storage):
    return AttemptRecorder(storage)


def make_mcq(
    texts=("3", "4", "5", "6"),
    correct=1,
    title="Counting",
    question="What is 2 + 2?",
    description=None,
) -> MCQCreate:
    return MCQCreate(
        title=title,
        description=description,
        question=question,
        choices=[ChoiceCreate(choice_text=t, is_correct=(i == correct)) for i, t in enumerate(texts)],
    )


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def auth_headers(user_id: str = OWNER) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}
