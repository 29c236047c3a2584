from typing import Optional

from pydantic import BaseModel

from app.core.exceptions import InvalidParameter, InvalidPayload


def is_blank(value: Optional[str]) -> bool:
    """None、空字符串、只有空白都视为空"""
    return value is None or not str(value).strip()


def require_id(value: Optional[str], action: str) -> str:
    """
    校验业务主键参数非空：
    - action 用于拼接错误信息，例如 "getting a post"
    """
    if is_blank(value):
        raise InvalidParameter(f"invalid parameters for {action}")
    return value


def require_fields(data: BaseModel, *fields: str) -> None:
    """校验请求体中的必填文本字段非空，按传入顺序报告第一个为空的字段"""
    for field in fields:
        if is_blank(getattr(data, field, None)):
            raise InvalidPayload(field=field)
