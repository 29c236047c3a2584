# app/storage/post/post_interface.py

from typing import List, Optional, Protocol

from app.schemas.post import PostCreate, PostOut, PostUpdate


class IPostRepository(Protocol):
    """
    帖子仓库接口协议（数据层抽象接口）
    业务层依赖本接口，而不是具体实现，方便后续替换为不同数据源
    - 存储顺序：按插入顺序（系统主键自增），更新不改变顺序
    """

    def create_post(self, data: PostCreate) -> PostOut:
        """
        创建帖子：
        - 生成新的 pid（UUID）与 created_at
        - number_of_views = 0, comment_ids = []
        """
        ...

    def get_post_by_pid(self, pid: str) -> Optional[PostOut]:
        """只读查询，不增加浏览数"""
        ...

    def list_posts(self) -> List[PostOut]:
        """按存储顺序返回全部帖子"""
        ...

    def update_post(self, pid: str, data: PostUpdate) -> Optional[PostOut]:
        """
        替换标题 / 正文 / 作者
        - 未找到返回 None
        """
        ...

    def increment_views(self, pid: str, step: int = 1) -> Optional[PostOut]:
        """
        浏览数自增（原子更新），返回自增后的帖子
        - 未找到返回 None
        """
        ...

    def append_comment_id(self, pid: str, cid: str) -> Optional[PostOut]:
        """
        向帖子的 comment_ids 末尾追加一条评论 ID
        - 未找到返回 None
        """
        ...

    def delete_post(self, pid: str) -> bool:
        """
        硬删除帖子记录
        - 不处理评论（评论不级联删除）
        - 返回是否删除成功
        """
        ...
