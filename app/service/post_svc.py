from typing import Dict, List

from app.schemas.post import PostCreate, PostOut, BatchPostsOut, PostUpdate
from app.storage.post.post_interface import IPostRepository

from app.core.logx import logger
from app.core.exceptions import PostNotFound, InvalidParameter
from app.core.validation import require_id, require_fields

POST_FIELDS = ("title", "content", "author")


#---------------------------------------- 增 -----------------------------------------
def create_post(post_repo: IPostRepository, data: PostCreate, to_dict: bool = True,) -> Dict | PostOut:
    """
    创建帖子（业务接口）：
    1. 校验标题 / 正文 / 作者非空（失败时不写库）
    2. 写入 posts 表（pid、created_at 由存储层生成，浏览数 0，评论列表为空）
    3. 返回新建的 PostOut
    """
    require_fields(data, *POST_FIELDS)

    post = post_repo.create_post(data)
    logger.info(f"Created post pid={post.pid} by author={post.author}")

    return post.model_dump() if to_dict else post


#------------------------------------ 查 ------------------------------------------

def list_posts(post_repo: IPostRepository, to_dict: bool = True,) -> Dict | BatchPostsOut:
    """
    获取全部帖子（存储顺序，不保证按时间排序）
    """
    items = post_repo.list_posts()
    result = BatchPostsOut(total=len(items), count=len(items), items=items)
    return result.model_dump() if to_dict else result


def get_post(post_repo: IPostRepository, pid: str, to_dict: bool = True,) -> Dict | PostOut:
    """
    获取单个帖子详情：
    - 每次成功读取浏览数 +1 并落库
    - 返回自增之后的帖子
    """
    require_id(pid, "getting a post")

    post = post_repo.increment_views(pid)
    if not post:
        logger.warning(f"Get post failed, pid={pid} not found")
        raise PostNotFound(pid=pid)

    return post.model_dump() if to_dict else post


def get_most_popular_posts(post_repo: IPostRepository, limit: int, to_dict: bool = True,) -> Dict | BatchPostsOut:
    """
    热门帖子：
    - 热度 = 评论数 + 浏览数
    - 按热度从高到低排序，热度相同保持存储顺序（sorted 为稳定排序）
    - 返回前 limit 条，limit 超过总数时返回全部
    - limit 为负数时报 InvalidParameter（参考行为中该接口只会因内部错误失败，这里有意收紧）
    """
    if limit is None or limit < 0:
        raise InvalidParameter(f"invalid number of posts: {limit}")

    posts: List[PostOut] = post_repo.list_posts()
    ranked = sorted(posts, key=lambda p: p.popularity, reverse=True)
    items = ranked[:limit]

    result = BatchPostsOut(total=len(posts), count=len(items), items=items)
    return result.model_dump() if to_dict else result


#------------------------------------ 改 / 删 ---------------------------------------

def update_post(post_repo: IPostRepository, pid: str, data: PostUpdate, to_dict: bool = True,) -> Dict | PostOut:
    """
    更新帖子：
    1. 校验 pid 非空
    2. 校验帖子存在
    3. 校验标题 / 正文 / 作者非空
    4. 整体替换三个字段，pid / created_at / 浏览数 / 评论列表保持不变
    """
    require_id(pid, "updating a post")

    if not post_repo.get_post_by_pid(pid):
        logger.warning(f"Update post failed, pid={pid} not found")
        raise PostNotFound(pid=pid)

    require_fields(data, *POST_FIELDS)

    updated = post_repo.update_post(pid, data)
    if not updated:
        # 校验之后被删除
        raise PostNotFound(pid=pid)

    logger.info(f"Updated post pid={pid}")
    return updated.model_dump() if to_dict else updated


def delete_post(post_repo: IPostRepository, pid: str,) -> bool:
    """
    删除帖子：
    - 直接从 posts 表删除
    - 不删除该帖子的评论（评论成为孤儿数据）
    """
    require_id(pid, "deleting a post")

    ok = post_repo.delete_post(pid)
    if not ok:
        logger.warning(f"Delete failed, post pid={pid} not found")
        raise PostNotFound(pid=pid)

    logger.info(f"Deleted post pid={pid}")
    return ok
