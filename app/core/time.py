from datetime import datetime, timezone, timedelta

# 东八区
CN_TZ = timezone(timedelta(hours=8))

def now_utc8() -> datetime:
    """返回东八区的当前时间（帖子 / 评论的 created_at 默认值）"""
    return datetime.now(CN_TZ)
