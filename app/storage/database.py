from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from fastapi import Depends

from app.core.config import get_settings
from app.models.base import Base
# 导入模型以便 create_all 能注册到 Base.metadata
from app.models import post as _post_model, comment as _comment_model  # noqa: F401
from app.storage.post.SQLAlchemyPostRepository import SQLAlchemyPostRepository
from app.storage.comment.SQLAlchemyCommentRepository import SQLAlchemyCommentRepository

# ======== 配置区 ========
# 见 app/core/config.py，均可通过环境变量覆盖
settings = get_settings()
DATABASE_URL = settings.sqlalchemy_url
# ========================

# SQLAlchemy 引擎
engine = create_engine(DATABASE_URL, echo=settings.db_echo, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None) -> None:
    """建表（表已存在则跳过），应用启动时调用"""
    Base.metadata.create_all(bind=bind or engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

# 未来可以根据配置切换不同的实现
def get_post_repo(db: Session = Depends(get_db)) -> SQLAlchemyPostRepository:
    return SQLAlchemyPostRepository(db)
def get_comment_repo(db: Session = Depends(get_db)) -> SQLAlchemyCommentRepository:
    return SQLAlchemyCommentRepository(db)
