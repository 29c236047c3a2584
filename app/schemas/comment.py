from typing import List
from datetime import datetime

from pydantic import BaseModel, ConfigDict


class CommentCreate(BaseModel):
    """
    创建评论（请求体）：
    - 所属帖子 PID 由路径参数给出
    """
    author_name: str              # 评论者名称
    content: str                  # 评论内容

    model_config = ConfigDict(from_attributes=True, extra="forbid")


class CommentOnlyCreate(BaseModel):
    """
    创建评论（仅限评论表内部调用，业务层已确认帖子存在）：
    """
    post_id: str                  # 所属帖子 PID
    author_name: str
    content: str

    model_config = ConfigDict(from_attributes=True, extra="forbid")


class CommentOut(BaseModel):
    """
    对外返回的评论信息
    """
    cid: str                      # 评论业务主键（UUID）
    post_id: str                  # 所属帖子 PID
    author_name: str              # 评论者名称
    content: str                  # 评论内容
    created_at: datetime          # 创建时间

    model_config = ConfigDict(from_attributes=True)


class BatchCommentsOut(BaseModel):
    """
    评论列表返回结构：
    - total: 该帖子的总评论数
    - count: 本次返回的评论条数
    - items: 评论列表（存储顺序）
    """
    total: int
    count: int
    items: List[CommentOut]

    model_config = ConfigDict(from_attributes=True)
