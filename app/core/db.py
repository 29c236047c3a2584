from contextlib import contextmanager

from sqlalchemy.orm import Session


@contextmanager
def transaction(db: Session):
    """
    仓库层统一的事务上下文：
    - 正常退出时 commit
    - 出现异常时 rollback 并继续向上抛出，由业务层 / 路由层处理
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
