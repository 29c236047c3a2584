from typing import Optional, List

from sqlalchemy.orm import Session

from app.models.comment import Comment
from app.schemas.comment import CommentOnlyCreate, CommentOut
from app.storage.comment.comment_interface import ICommentRepository
from app.core.db import transaction


class SQLAlchemyCommentRepository(ICommentRepository):
    """
    使用 SQLAlchemy 实现的评论仓库
    """

    def __init__(self, db: Session):
        self.db = db

    def _base_query(self):
        return self.db.query(Comment).order_by(Comment._id.asc())

    def create_comment(self, data: CommentOnlyCreate) -> CommentOut:
        payload = data.model_dump()
        comment = Comment(**payload)

        with transaction(self.db):
            self.db.add(comment)

        self.db.refresh(comment)
        return CommentOut.model_validate(comment)

    def get_comment_by_cid(self, cid: str) -> Optional[CommentOut]:
        comment = self.db.query(Comment).filter(Comment.cid == cid).first()
        return CommentOut.model_validate(comment) if comment else None

    def list_comments(self) -> List[CommentOut]:
        rows = self._base_query().all()
        return [CommentOut.model_validate(row) for row in rows]

    def list_comments_by_post(self, post_id: str) -> List[CommentOut]:
        rows = (
            self._base_query()
            .filter(Comment.post_id == post_id)
            .all()
        )
        return [CommentOut.model_validate(row) for row in rows]
