"""手动拉取用户数据并打印图表数据

使用方法:
    USER_ID=12 python scripts/fetch_dashboard.py
    USER_ID=18 USE_MOCK_DATA=true python scripts/fetch_dashboard.py
"""
import asyncio
import sys
import os

# 添加项目根目录到路径
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sportsee.config import ClientConfig, settings
from sportsee.services.dashboard_loader import DashboardLoader
from sportsee.services.data_client import DataClient

# 从环境变量读取用户ID
USER_ID = os.environ.get("USER_ID", str(settings.DEFAULT_USER_ID))


async def fetch_and_print():
    if not USER_ID.isdigit():
        print(f"错误: USER_ID 必须是数字，当前为 {USER_ID!r}")
        print("使用方法: USER_ID=12 python scripts/fetch_dashboard.py")
        sys.exit(1)

    async with DataClient(ClientConfig.from_settings(settings)) as client:
        print("=" * 60)
        print(f"拉取用户 {USER_ID} 的数据 ({settings.SPORTSEE_API_URL})...")
        print("=" * 60)
        loader = DashboardLoader(client)
        dashboard = await loader.load_dashboard(int(USER_ID))
        print(dashboard.model_dump_json(by_alias=True, indent=2))
        print("\n✅ 完成！")


if __name__ == "__main__":
    asyncio.run(fetch_and_print())
