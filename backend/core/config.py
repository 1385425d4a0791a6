"""
系统配置管理
统一管理所有配置项，支持环境变量覆盖
"""

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional
from urllib.parse import quote_plus

# 获取backend目录的绝对路径
BACKEND_DIR = Path(__file__).parent.parent.resolve()
ENV_FILE = BACKEND_DIR / ".env"

DEFAULT_JWT_SECRET = "your-secret-key-change-in-production"


class Settings(BaseSettings):
    """系统配置"""

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # 应用信息
    app_name: str = "Blog Manager"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # 数据库配置
    database_url: Optional[str] = None  # 设置后优先使用，例如 sqlite+aiosqlite:///./blog.db
    db_host: str = "localhost"
    db_port: int = 3306
    db_user: str = "root"
    db_password: str = ""
    db_name: str = "blog_manager"

    @property
    def db_url(self) -> str:
        if self.database_url:
            return self.database_url
        encoded_user = quote_plus(self.db_user)
        encoded_pwd = quote_plus(self.db_password)
        return f"mysql+aiomysql://{encoded_user}:{encoded_pwd}@{self.db_host}:{self.db_port}/{self.db_name}"

    @property
    def is_sqlite(self) -> bool:
        return self.db_url.startswith("sqlite")

    # JWT令牌配置
    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 60

    # 跨域
    cors_origins: List[str] = ["*"]

    # 请求日志：超过该阈值（秒）记录为慢请求
    slow_request_threshold: float = 1.0

    # 客户端（blog_client / scripts/blog_console.py）
    client_base_url: str = "http://localhost:8000"
    client_timeout: float = 10.0


_settings_instance: Optional[Settings] = None


def get_settings() -> Settings:
    """
    获取配置单例
    支持运行时重新加载
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()

        if not _settings_instance.debug and _settings_instance.jwt_secret == DEFAULT_JWT_SECRET:
            import logging
            logging.getLogger("core.config").warning(
                "🚨 [安全警告] 您正在生产环境模式下使用默认的 JWT_SECRET！"
                "请立即在 .env 文件中配置 JWT_SECRET。"
            )
    return _settings_instance


def reload_settings() -> Settings:
    """重新加载配置（环境变量变更后调用）"""
    global _settings_instance
    _settings_instance = Settings()
    return _settings_instance
