from fastapi import APIRouter, Depends

from app.schemas.comment import CommentCreate, CommentOut, BatchCommentsOut
from app.core.biz_response import BizResponse
from app.service import comment_svc

from app.storage.database import get_post_repo, get_comment_repo
from app.storage.post.post_interface import IPostRepository
from app.storage.comment.comment_interface import ICommentRepository

from app.core.exceptions import PostNotFound, InvalidParameter, InvalidPayload
from app.core.logx import logger

comments_router = APIRouter(prefix="/comments", tags=["comments"])


@comments_router.post("/post/{pid}", response_model=CommentOut)
def add_comment(
    pid: str,
    data: CommentCreate,
    post_repo: IPostRepository = Depends(get_post_repo),
    comment_repo: ICommentRepository = Depends(get_comment_repo),
):
    """
    给帖子添加评论：
    - 校验帖子是否存在
    - 校验评论者名称 / 内容非空
    - 创建评论并追加到帖子的 comment_ids
    """
    try:
        new_comment = comment_svc.add_comment(
            post_repo=post_repo,
            comment_repo=comment_repo,
            pid=pid,
            data=data,
            to_dict=True,
        )
        return BizResponse(data=new_comment, status_code=201)
    except (InvalidParameter, InvalidPayload) as e:
        return BizResponse(data=None, msg=str(e), status_code=400)
    except PostNotFound as e:
        return BizResponse(data=None, msg=str(e), status_code=404)
    except Exception:
        logger.exception("add_comment error")
        return BizResponse(data=None, msg="failed while trying to add a comment", status_code=500)


@comments_router.get("/post/{pid}", response_model=BatchCommentsOut)
def list_comments_by_post(
    pid: str,
    post_repo: IPostRepository = Depends(get_post_repo),
    comment_repo: ICommentRepository = Depends(get_comment_repo),
):
    """
    获取某帖子下的全部评论（存储顺序）
    """
    try:
        result = comment_svc.get_comments_by_post(
            post_repo=post_repo,
            comment_repo=comment_repo,
            pid=pid,
            to_dict=True,
        )
        return BizResponse(data=result)
    except InvalidParameter as e:
        return BizResponse(data=None, msg=str(e), status_code=400)
    except PostNotFound as e:
        return BizResponse(data=None, msg=str(e), status_code=404)
    except Exception:
        logger.exception("list_comments_by_post error")
        return BizResponse(data=None, msg="failed while trying to get comments", status_code=500)
