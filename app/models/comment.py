from sqlalchemy import Column, Integer, String, TIMESTAMP, Text, UniqueConstraint, Index
import uuid
from app.models.base import Base
from app.core.time import now_utc8

# 删除帖子时不级联删除评论，所以 post_id 不加外键约束，评论可能成为孤儿数据

class Comment(Base):
    """ 评论表，每条评论属于且只属于一篇帖子。

        CREATE TABLE IF NOT EXISTS comments (
            _id INT AUTO_INCREMENT PRIMARY KEY,               -- 系统主键（自增）
            cid VARCHAR(36) NOT NULL UNIQUE,                  -- 业务主键（UUID，对外使用）
            post_id VARCHAR(36) NOT NULL,                     -- 所属帖子 PID（创建时必须存在）
            author_name VARCHAR(100) NOT NULL,                -- 评论者名称
            content TEXT NOT NULL,                            -- 评论内容
            created_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
        );

        CREATE INDEX idx_comments_post ON comments (post_id);
    """

    __tablename__ = "comments"

    # 系统主键（自增）
    _id = Column(Integer, primary_key=True, autoincrement=True)
    # 业务主键（UUID，对外使用）
    cid = Column(String(36), unique=True, nullable=False, default=lambda: str(uuid.uuid4()))
    # 所属帖子 ID
    post_id = Column(String(36), nullable=False)
    # 评论者名称
    author_name = Column(String(100), nullable=False)
    # 评论内容
    content = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=now_utc8)  # 创建时间

    __table_args__ = (
        UniqueConstraint('cid', name='unique_cid'),
        Index("idx_comments_post", "post_id"),
    )
