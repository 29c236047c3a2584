import os

# 测试使用内存 SQLite，需在导入 app.storage.database 之前设置
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.models.base import Base
from app.storage.database import get_db, init_db
from app.storage.post.SQLAlchemyPostRepository import SQLAlchemyPostRepository
from app.storage.comment.SQLAlchemyCommentRepository import SQLAlchemyCommentRepository


@pytest.fixture(scope="function")
def engine():
    """Fresh in-memory database per test"""
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture(scope="function")
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def post_repo(db):
    return SQLAlchemyPostRepository(db)


@pytest.fixture
def comment_repo(db):
    return SQLAlchemyCommentRepository(db)


@pytest.fixture
def client(engine):
    from main import app

    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
