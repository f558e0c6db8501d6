"""
应用配置管理
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from sportsee.fixtures.provider import FixtureProvider, StaticFixtureProvider


class Settings(BaseSettings):
    """应用配置"""

    # 应用配置
    APP_NAME: str = "SportSee Dashboard"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # SportSee 后端
    SPORTSEE_API_URL: str = "http://localhost:3000"
    USE_MOCK_DATA: bool = False  # True: 不请求后端，直接使用静态数据
    HTTP_TIMEOUT: float = 10.0  # 秒

    # 前端未指定用户时的默认用户
    DEFAULT_USER_ID: int = 12

    # CORS配置 (从环境变量 ALLOWED_ORIGINS 读取，JSON 格式)
    ALLOWED_ORIGINS: list = [
        "http://localhost:5173",  # Vite 开发服务器
    ]

    # 日志配置
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"  # 忽略额外的环境变量
    )


class ClientConfig(BaseModel):
    """
    DataClient 的显式配置

    由调用方注入，客户端不读取任何全局的 mock 开关
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    base_url: str = "http://localhost:3000"
    use_mock_data: bool = False
    timeout: float = 10.0
    fixtures: FixtureProvider = Field(default_factory=StaticFixtureProvider)

    @classmethod
    def from_settings(
        cls, settings: "Settings", fixtures: Optional[FixtureProvider] = None
    ) -> "ClientConfig":
        """
        从应用配置构建客户端配置

        Args:
            settings: 应用配置
            fixtures: 备用数据提供者（默认使用内置静态数据）

        Returns:
            客户端配置
        """
        return cls(
            base_url=settings.SPORTSEE_API_URL.rstrip("/"),
            use_mock_data=settings.USE_MOCK_DATA,
            timeout=settings.HTTP_TIMEOUT,
            fixtures=fixtures or StaticFixtureProvider(),
        )


settings = Settings()
