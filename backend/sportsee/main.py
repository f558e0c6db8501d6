"""
FastAPI主应用
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sportsee.config import ClientConfig, settings
from sportsee.services.data_client import DataClient

# 配置日志
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    # 启动
    logger.info(f"🚀 {settings.APP_NAME} v{settings.APP_VERSION} 启动中...")

    config = ClientConfig.from_settings(settings)
    app.state.data_client = DataClient(config)
    if config.use_mock_data:
        logger.info("🧪 使用静态数据模式，不请求SportSee后端")
    else:
        logger.info(f"🔗 SportSee后端: {config.base_url}")

    logger.info(f"✅ {settings.APP_NAME} 启动成功！")
    logger.info(f"📍 API文档: http://{settings.HOST}:{settings.PORT}/docs")

    yield

    # 关闭
    logger.info(f"👋 {settings.APP_NAME} 关闭中...")
    await app.state.data_client.close()
    logger.info("✅ HTTP客户端已关闭")


# 创建FastAPI应用
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="SportSee 个人运动数据看板 - 图表数据接口",
    lifespan=lifespan,
    debug=settings.DEBUG,
)

# 配置CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS if not settings.DEBUG else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# 健康检查端点
@app.get("/")
async def root():
    """根路径 - API信息"""
    return {
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "healthy",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """健康检查"""
    return {"status": "ok"}


# 注册路由
from sportsee.api.v1 import dashboard

app.include_router(dashboard.router, prefix="/api/v1/dashboard", tags=["Dashboard"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "sportsee.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
