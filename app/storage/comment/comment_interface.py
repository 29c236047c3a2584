# app/storage/comment/comment_interface.py

from typing import Optional, List, Protocol

from app.schemas.comment import CommentOnlyCreate, CommentOut


class ICommentRepository(Protocol):
    """
    评论仓库接口协议（数据层抽象接口）
    业务层依赖本接口，而不是具体实现，方便后续替换为不同数据源
    """

    # ---------- 创建 ----------

    def create_comment(self, data: CommentOnlyCreate) -> CommentOut:
        """
        创建评论（仅写入 comments 表）：
        - 生成新的 cid（UUID）与 created_at
        - 帖子的 comment_ids 由业务层调用帖子仓库追加
        """
        ...

    # ---------- 查询 ----------

    def get_comment_by_cid(self, cid: str) -> Optional[CommentOut]:
        ...

    def list_comments(self) -> List[CommentOut]:
        """按存储顺序返回全部评论"""
        ...

    def list_comments_by_post(self, post_id: str) -> List[CommentOut]:
        """
        返回 post_id 匹配的全部评论：
        - 按存储顺序
        - 走 idx_comments_post 索引
        """
        ...
