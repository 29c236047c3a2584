from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


class BizResponse(JSONResponse):
    """
    统一的业务响应体：
    {
        "code": 200,        # 与 HTTP 状态码一致
        "msg": "ok",        # 错误时为可读的错误信息
        "data": ...         # 业务数据，失败时一般为 None / False
    }
    """

    def __init__(self, data: Any = None, msg: Optional[str] = "ok", status_code: int = 200, **kwargs):
        content = {
            "code": status_code,
            "msg": msg,
            "data": jsonable_encoder(data),
        }
        super().__init__(content=content, status_code=status_code, **kwargs)
