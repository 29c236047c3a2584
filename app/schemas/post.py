from typing import List
from datetime import datetime

from pydantic import BaseModel, ConfigDict


# 创建一篇帖子
class PostCreate(BaseModel):
    """
    创建帖子
    - 字段非空校验放在业务层
    """
    title: str            # 标题
    content: str          # 正文内容
    author: str           # 作者

    model_config = ConfigDict(from_attributes=True, extra="forbid")


class PostUpdate(BaseModel):
    """
    更新帖子：标题 / 正文 / 作者整体替换
    - 字段非空校验放在业务层（保证"先查存在，再校验内容"的顺序）
    - pid, created_at, number_of_views, comment_ids 不允许修改
    """
    title: str
    content: str
    author: str

    model_config = ConfigDict(from_attributes=True, extra="forbid")


# 查看帖子
class PostOut(BaseModel):
    """
    对外返回的帖子信息
    """
    pid: str                        # 帖子业务主键
    title: str
    content: str
    author: str
    created_at: datetime            # 创建时间
    number_of_views: int            # 浏览数
    comment_ids: List[str] = []     # 评论 ID 列表（按评论创建顺序）

    model_config = ConfigDict(from_attributes=True)

    @property
    def popularity(self) -> int:
        """热度 = 评论数 + 浏览数"""
        return len(self.comment_ids) + int(self.number_of_views)


class BatchPostsOut(BaseModel):
    """
    帖子列表返回：
    - total: 满足条件的总数
    - count: 本次返回的数量
    - items: 帖子列表
    """
    total: int
    count: int
    items: List[PostOut]

    model_config = ConfigDict(from_attributes=True)
