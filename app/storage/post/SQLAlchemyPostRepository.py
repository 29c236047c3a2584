from typing import Optional, List

from sqlalchemy.orm import Session

from app.models.post import Post
from app.schemas.post import PostCreate, PostOut, PostUpdate
from app.storage.post.post_interface import IPostRepository
from app.core.db import transaction


class SQLAlchemyPostRepository(IPostRepository):
    """
    使用 SQLAlchemy 实现的帖子仓库
    业务层依赖 IPostRepository 抽象接口
    """

    def __init__(self, db: Session):
        self.db = db

    # ---------- 内部基础查询 ----------

    def _base_query(self):
        """按系统主键排序，即插入顺序"""
        return self.db.query(Post).order_by(Post._id.asc())

    def _get_post_orm_by_pid(self, pid: str, for_update: bool = False) -> Optional[Post]:
        q = self.db.query(Post).filter(Post.pid == pid)
        if for_update:
            q = q.with_for_update()
        return q.first()

    # ---------- 创建 ----------

    def create_post(self, data: PostCreate) -> PostOut:
        payload = data.model_dump()
        post = Post(**payload, number_of_views=0, comment_ids=[])

        with transaction(self.db):
            self.db.add(post)

        # 刷新以获取 pid / created_at
        self.db.refresh(post)
        return PostOut.model_validate(post)

    # ---------- 查询 ----------

    def get_post_by_pid(self, pid: str) -> Optional[PostOut]:
        post = self._get_post_orm_by_pid(pid)
        if not post:
            return None
        return PostOut.model_validate(post)

    def list_posts(self) -> List[PostOut]:
        posts: List[Post] = self._base_query().all()
        return [PostOut.model_validate(post) for post in posts]

    # ---------- 更新 ----------

    def update_post(self, pid: str, data: PostUpdate) -> Optional[PostOut]:
        post = self._get_post_orm_by_pid(pid)
        if not post:
            return None

        update_data = data.model_dump()
        with transaction(self.db):
            for field, value in update_data.items():
                setattr(post, field, value)

        self.db.refresh(post)
        return PostOut.model_validate(post)

    def increment_views(self, pid: str, step: int = 1) -> Optional[PostOut]:
        """
        浏览数自增：
        - 使用 UPDATE ... SET number_of_views = number_of_views + step，避免并发读改写丢失计数
        """
        with transaction(self.db):
            affected = (
                self.db.query(Post)
                .filter(Post.pid == pid)
                .update(
                    {Post.number_of_views: Post.number_of_views + step},
                    synchronize_session=False,
                )
            )

        if not affected:
            return None

        post = self._get_post_orm_by_pid(pid)
        if not post:
            return None
        self.db.refresh(post)
        return PostOut.model_validate(post)

    def append_comment_id(self, pid: str, cid: str) -> Optional[PostOut]:
        """
        追加评论 ID：
        - 行锁（SELECT ... FOR UPDATE）后读改写，保证并发评论不会互相覆盖
        - JSON 列需要整体赋新列表，SQLAlchemy 才能检测到变更
        """
        with transaction(self.db):
            post = self._get_post_orm_by_pid(pid, for_update=True)
            if not post:
                return None
            post.comment_ids = list(post.comment_ids or []) + [cid]

        self.db.refresh(post)
        return PostOut.model_validate(post)

    # ---------- 删除 ----------

    def delete_post(self, pid: str) -> bool:
        post = self._get_post_orm_by_pid(pid)
        if not post:
            return False

        with transaction(self.db):
            self.db.delete(post)

        return True
