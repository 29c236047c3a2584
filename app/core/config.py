from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    应用配置（从环境变量 / .env 读取，字段名不区分大小写）：
    - DATABASE_URL 设置时直接使用（例如 sqlite:///./blog.db）
    - 否则用 DB_HOST / DB_PORT / DB_USER / DB_PASSWORD / DB_NAME 拼 MySQL 连接串
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ======== 数据库 ========
    database_url: Optional[str] = None
    db_host: str = "127.0.0.1"
    db_port: int = 3306
    db_user: str = "root"
    db_password: str = ""
    db_name: str = "blog_db"
    db_echo: bool = False     # SQLAlchemy 是否打印 SQL

    # ======== 日志 ========
    log_level: str = "INFO"

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url
        return (
            f"mysql+pymysql://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}?charset=utf8mb4"
        )


@lru_cache
def get_settings() -> Settings:
    """进程内缓存的配置实例"""
    return Settings()
