from sqlalchemy import Column, Integer, String, TIMESTAMP, Text, JSON, UniqueConstraint
from app.models.base import Base
from app.core.time import now_utc8
import uuid


class Post(Base):
    """ 博客帖子表，存储帖子的标题、正文、作者以及浏览数、评论 ID 列表。

        CREATE TABLE IF NOT EXISTS posts (
            _id INT AUTO_INCREMENT PRIMARY KEY,           -- 系统主键ID（自增，决定列表的存储顺序）
            pid VARCHAR(36) UNIQUE,                       -- 业务主键PID（UUID）
            title VARCHAR(255) NOT NULL,                  -- 标题
            content TEXT NOT NULL,                        -- 正文
            author VARCHAR(100) NOT NULL,                 -- 作者名
            created_at TIMESTAMP NOT NULL,                -- 创建时间（创建后不可变）
            number_of_views INT NOT NULL DEFAULT 0,       -- 浏览数（只增不减）
            comment_ids JSON NOT NULL                     -- 评论 ID 列表（只追加）
        );
    """

    __tablename__ = "posts"

    # 系统主键：自增，不对外暴露
    _id = Column(Integer, primary_key=True, autoincrement=True)
    # 业务主键：UUID，删除后也不会复用
    pid = Column(String(36), unique=True, nullable=False, default=lambda: str(uuid.uuid4()))

    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    author = Column(String(100), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=now_utc8)

    number_of_views = Column(Integer, nullable=False, default=0)
    # 反向索引：只在新增评论时追加，不作为"帖子有哪些评论"的查询依据
    comment_ids = Column(JSON, nullable=False, default=list)

    __table_args__ = (
        UniqueConstraint('pid', name='unique_pid'),
    )
