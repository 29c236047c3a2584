# domain_exceptions.py
from typing import Optional


class PostNotFound(Exception):
    """
    在需要帖子存在的场景下未找到对应帖子时抛出：
    - 例如 get_post / update_post / delete_post / add_comment 等
    """

    def __init__(self, pid: Optional[str] = None, message: Optional[str] = None):
        if message:
            self.message = message
        elif pid is not None:
            self.message = f"post {pid} not found"
        else:
            self.message = "post not found"

        super().__init__(self.message)


class InvalidParameter(Exception):
    """帖子 ID 为空、数量为负等非法参数"""
    def __init__(self, message: str = "invalid parameters"):
        self.message = message
        super().__init__(message)


class InvalidPayload(Exception):
    """
    请求体字段校验失败：
    - 标题 / 内容 / 作者 / 评论者名称 为空或只有空白
    """

    def __init__(self, field: Optional[str] = None, message: Optional[str] = None):
        if message:
            self.message = message
        elif field is not None:
            self.message = f"field '{field}' must not be empty"
        else:
            self.message = "invalid payload"

        self.field = field
        super().__init__(self.message)
