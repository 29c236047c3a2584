from typing import Dict

from app.schemas.comment import (
    CommentCreate,
    CommentOnlyCreate,
    CommentOut,
    BatchCommentsOut,
)
from app.storage.comment.comment_interface import ICommentRepository
from app.storage.post.post_interface import IPostRepository

from app.core.logx import logger
from app.core.exceptions import PostNotFound
from app.core.validation import require_id, require_fields

#---------------------------------------- 增 -----------------------------------------

def add_comment(
    post_repo: IPostRepository,
    comment_repo: ICommentRepository,
    pid: str,
    data: CommentCreate,
    to_dict: bool = True,
) -> Dict | CommentOut:
    """
    给帖子添加评论（业务接口）：
    1. 校验 pid 非空
    2. 校验帖子是否存在
    3. 校验评论者名称 / 内容非空（在确认帖子存在之后）
    4. 在 comments 表创建一条记录
    5. 把评论 ID 追加到帖子的 comment_ids
    6. 返回新建的 CommentOut
    """
    # 1. 校验参数
    require_id(pid, "adding a comment")

    # 2. 校验帖子是否存在
    post = post_repo.get_post_by_pid(pid)
    if not post:
        raise PostNotFound(pid=pid)

    # 3. 校验请求体
    require_fields(data, "author_name", "content")

    # 4. 创建评论记录
    comment_only = CommentOnlyCreate(
        post_id=post.pid,
        author_name=data.author_name,
        content=data.content,
    )
    comment = comment_repo.create_comment(comment_only)
    logger.info(f"Created comment cid={comment.cid} on post={post.pid} by author={comment.author_name}")

    # 5. 追加到帖子的评论 ID 列表（与第 4 步不在同一事务中）
    # 帖子若在两步之间被删除，已写入的评论保留为孤儿数据，调用方收到 NotFound
    if not post_repo.append_comment_id(post.pid, comment.cid):
        logger.warning(f"Post pid={post.pid} removed before comment cid={comment.cid} was indexed")
        raise PostNotFound(pid=post.pid)

    return comment.model_dump() if to_dict else comment

#------------------------------- 查询：帖子的评论 ------------------------------------

def get_comments_by_post(
    post_repo: IPostRepository,
    comment_repo: ICommentRepository,
    pid: str,
    to_dict: bool = True,
) -> Dict | BatchCommentsOut:
    """
    获取某帖子的全部评论：
    - 先确认帖子存在（已删除帖子的孤儿评论因此不可见）
    - 以评论表的 post_id 为准，不依赖帖子上的 comment_ids
    """
    require_id(pid, "getting comments")

    post = post_repo.get_post_by_pid(pid)
    if not post:
        raise PostNotFound(pid=pid)

    items = comment_repo.list_comments_by_post(post.pid)
    result = BatchCommentsOut(total=len(items), count=len(items), items=items)
    return result.model_dump() if to_dict else result
