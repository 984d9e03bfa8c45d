"""运行配置：从环境变量 STOREFRONT_* 或 .env 读取

    STOREFRONT_ENV=local STOREFRONT_HEADLESS=false pytest -m ui
"""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    env: str = Field(default="demo", description="目标环境，对应 config.pages.BASE_URLS 的 key")
    base_url: str | None = Field(default=None, description="覆盖当前环境的站点地址")

    action_timeout_ms: int = Field(default=30_000, description="click/fill/wait_for 默认超时")
    navigation_timeout_ms: int = Field(default=30_000, description="页面跳转/加载状态默认超时")
    expect_timeout_ms: int = Field(default=10_000, description="expect 断言默认超时")

    browser: str = Field(default="chromium", description="chromium / firefox / webkit")
    headless: bool = True
    log_level: str = "INFO"
    storage_state_path: str = "storage/login.json"


settings = Settings()
