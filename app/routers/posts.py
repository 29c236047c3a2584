from fastapi import APIRouter, Depends

from app.schemas.post import PostCreate, PostOut, BatchPostsOut, PostUpdate
from app.core.biz_response import BizResponse
from app.service import post_svc

from app.storage.database import get_post_repo
from app.storage.post.post_interface import IPostRepository

from app.core.exceptions import PostNotFound, InvalidParameter, InvalidPayload
from app.core.logx import logger

posts_router = APIRouter(prefix="/posts", tags=["posts"])


# --------------------------------- 创建帖子 ---------------------------------
@posts_router.post("/", response_model=PostOut)
def create_post(
    payload: PostCreate,
    post_repo: IPostRepository = Depends(get_post_repo),
):
    """
    创建帖子：
    - 标题 / 正文 / 作者都不能为空
    - 返回新帖子（含 pid）
    """
    try:
        post = post_svc.create_post(post_repo=post_repo, data=payload, to_dict=True)
        return BizResponse(data=post, status_code=201)
    except InvalidPayload as e:
        return BizResponse(data=None, msg=str(e), status_code=400)
    except Exception:
        logger.exception("create_post error")
        return BizResponse(data=None, msg="failed while trying to create a post", status_code=500)


# --------------------------------- 查询帖子 ---------------------------------
@posts_router.get("/", response_model=BatchPostsOut)
def list_posts(
    post_repo: IPostRepository = Depends(get_post_repo),
):
    """
    获取全部帖子（不分页）
    """
    try:
        result = post_svc.list_posts(post_repo=post_repo, to_dict=True)
        return BizResponse(data=result)
    except Exception:
        logger.exception("list_posts error")
        return BizResponse(data=None, msg="failed while trying to get posts", status_code=500)


# 注意：需要注册在 /{pid} 之前，否则 popular 会被当作 pid
@posts_router.get("/popular", response_model=BatchPostsOut)
def list_most_popular_posts(
    limit: int = 10,
    post_repo: IPostRepository = Depends(get_post_repo),
):
    """
    热门帖子：按 评论数 + 浏览数 从高到低取前 limit 条
    """
    try:
        result = post_svc.get_most_popular_posts(post_repo=post_repo, limit=limit, to_dict=True)
        return BizResponse(data=result)
    except InvalidParameter as e:
        return BizResponse(data=None, msg=str(e), status_code=400)
    except Exception:
        logger.exception("list_most_popular_posts error")
        return BizResponse(data=None, msg="failed while trying to get most popular posts", status_code=500)


@posts_router.get("/{pid}", response_model=PostOut)
def get_post(
    pid: str,
    post_repo: IPostRepository = Depends(get_post_repo),
):
    """
    通过帖子 ID 获取帖子详情（浏览数 +1）
    """
    try:
        post = post_svc.get_post(post_repo=post_repo, pid=pid, to_dict=True)
        return BizResponse(data=post)
    except InvalidParameter as e:
        return BizResponse(data=None, msg=str(e), status_code=400)
    except PostNotFound as e:
        return BizResponse(data=None, msg=str(e), status_code=404)
    except Exception:
        logger.exception("get_post error")
        return BizResponse(data=None, msg="failed while trying to get a post", status_code=500)


# --------------------------------- 更新 / 删除帖子 ---------------------------------
@posts_router.put("/{pid}", response_model=PostOut)
def update_post(
    pid: str,
    payload: PostUpdate,
    post_repo: IPostRepository = Depends(get_post_repo),
):
    """
    更新帖子：整体替换标题 / 正文 / 作者
    """
    try:
        post = post_svc.update_post(post_repo=post_repo, pid=pid, data=payload, to_dict=True)
        return BizResponse(data=post)
    except (InvalidParameter, InvalidPayload) as e:
        return BizResponse(data=None, msg=str(e), status_code=400)
    except PostNotFound as e:
        return BizResponse(data=None, msg=str(e), status_code=404)
    except Exception:
        logger.exception("update_post error")
        return BizResponse(data=None, msg="failed while trying to update a post", status_code=500)


@posts_router.delete("/{pid}")
def delete_post(
    pid: str,
    post_repo: IPostRepository = Depends(get_post_repo),
):
    """
    删除帖子（评论不会被级联删除）
    """
    try:
        ok = post_svc.delete_post(post_repo=post_repo, pid=pid)
        return BizResponse(data=ok)
    except InvalidParameter as e:
        return BizResponse(data=False, msg=str(e), status_code=400)
    except PostNotFound as e:
        return BizResponse(data=False, msg=str(e), status_code=404)
    except Exception:
        logger.exception("delete_post error")
        return BizResponse(data=False, msg="failed while trying to delete a post", status_code=500)
