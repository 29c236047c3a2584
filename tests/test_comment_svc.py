import pytest

from app.core.exceptions import PostNotFound, InvalidParameter, InvalidPayload
from app.schemas.comment import CommentCreate
from app.schemas.post import PostCreate
from app.service import post_svc, comment_svc


@pytest.fixture
def pid(post_repo):
    post = post_svc.create_post(
        post_repo=post_repo,
        data=PostCreate(title="A", content="B", author="C"),
        to_dict=False,
    )
    return post.pid


def add(post_repo, comment_repo, pid, author_name="x", content="y"):
    return comment_svc.add_comment(
        post_repo=post_repo,
        comment_repo=comment_repo,
        pid=pid,
        data=CommentCreate(author_name=author_name, content=content),
        to_dict=False,
    )


def test_add_comment_links_to_post(post_repo, comment_repo, pid):
    comment = add(post_repo, comment_repo, pid, "alice", "nice post")

    assert comment.post_id == pid
    assert comment.created_at is not None
    assert post_repo.get_post_by_pid(pid).comment_ids == [comment.cid]

    result = comment_svc.get_comments_by_post(
        post_repo=post_repo, comment_repo=comment_repo, pid=pid, to_dict=False
    )
    matches = [
        c for c in result.items
        if (c.author_name, c.content, c.post_id) == ("alice", "nice post", pid)
    ]
    assert len(matches) == 1


def test_add_comment_does_not_count_as_view(post_repo, comment_repo, pid):
    add(post_repo, comment_repo, pid)
    assert post_repo.get_post_by_pid(pid).number_of_views == 0


def test_comment_ids_are_unique_and_ordered(post_repo, comment_repo, pid):
    cids = [add(post_repo, comment_repo, pid, content=f"c{i}").cid for i in range(10)]

    assert len(set(cids)) == 10
    assert post_repo.get_post_by_pid(pid).comment_ids == cids


def test_get_comments_only_returns_matching_post(post_repo, comment_repo, pid):
    other = post_svc.create_post(
        post_repo=post_repo,
        data=PostCreate(title="other", content="B", author="C"),
        to_dict=False,
    ).pid
    first = add(post_repo, comment_repo, pid, content="one")
    add(post_repo, comment_repo, other, content="elsewhere")
    second = add(post_repo, comment_repo, pid, content="two")

    result = comment_svc.get_comments_by_post(
        post_repo=post_repo, comment_repo=comment_repo, pid=pid, to_dict=False
    )

    assert [c.cid for c in result.items] == [first.cid, second.cid]
    assert result.total == 2


def test_add_comment_to_unknown_post(post_repo, comment_repo):
    with pytest.raises(PostNotFound) as exc:
        add(post_repo, comment_repo, "unknown-id")

    assert "unknown-id" in str(exc.value)
    assert comment_repo.list_comments() == []


def test_add_comment_checks_post_before_payload(post_repo, comment_repo):
    with pytest.raises(PostNotFound):
        add(post_repo, comment_repo, "unknown-id", author_name="", content="")


@pytest.mark.parametrize("author_name, content", [("", "y"), ("x", ""), (" ", "y")])
def test_add_comment_rejects_empty_fields(post_repo, comment_repo, pid, author_name, content):
    with pytest.raises(InvalidPayload):
        add(post_repo, comment_repo, pid, author_name=author_name, content=content)

    assert comment_repo.list_comments() == []
    assert post_repo.get_post_by_pid(pid).comment_ids == []


def test_add_comment_rejects_blank_id(post_repo, comment_repo):
    with pytest.raises(InvalidParameter):
        add(post_repo, comment_repo, "")


def test_comments_orphaned_after_post_delete(post_repo, comment_repo, pid):
    comment = add(post_repo, comment_repo, pid)

    post_svc.delete_post(post_repo=post_repo, pid=pid)

    # 评论不会被级联删除，但已无法通过帖子查询到
    assert comment_repo.get_comment_by_cid(comment.cid) is not None
    assert [c.cid for c in comment_repo.list_comments()] == [comment.cid]
    with pytest.raises(PostNotFound):
        comment_svc.get_comments_by_post(
            post_repo=post_repo, comment_repo=comment_repo, pid=pid
        )


def test_comment_kept_when_post_removed_before_indexing(post_repo, comment_repo, pid):
    class PostDeletedMidway:
        """帖子在评论写入之后、追加评论 ID 之前被删除"""

        def get_post_by_pid(self, pid):
            return post_repo.get_post_by_pid(pid)

        def append_comment_id(self, pid, cid):
            post_repo.delete_post(pid)
            return post_repo.append_comment_id(pid, cid)

    with pytest.raises(PostNotFound):
        add(PostDeletedMidway(), comment_repo, pid)

    orphans = comment_repo.list_comments()
    assert len(orphans) == 1
    assert orphans[0].post_id == pid
