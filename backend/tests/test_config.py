"""
配置与备用数据测试
"""
from sportsee.config import ClientConfig, Settings
from sportsee.fixtures import FixtureProvider, StaticFixtureProvider


class TestClientConfig:
    def test_from_settings(self):
        settings = Settings(
            SPORTSEE_API_URL="http://sportsee.local:3000/",
            USE_MOCK_DATA=True,
            HTTP_TIMEOUT=2.5,
        )
        config = ClientConfig.from_settings(settings)

        assert config.base_url == "http://sportsee.local:3000"
        assert config.use_mock_data is True
        assert config.timeout == 2.5
        assert isinstance(config.fixtures, StaticFixtureProvider)

    def test_custom_fixtures(self):
        fixtures = StaticFixtureProvider()
        config = ClientConfig.from_settings(Settings(), fixtures=fixtures)
        assert config.fixtures is fixtures

    def test_defaults(self):
        config = ClientConfig()
        assert config.base_url == "http://localhost:3000"
        assert config.use_mock_data is False


class TestStaticFixtureProvider:
    def test_known_users(self):
        provider = StaticFixtureProvider()
        assert isinstance(provider, FixtureProvider)
        assert provider.get_user_data(12).profile.first_name == "Karl"
        assert provider.get_user_data(18).profile.first_name == "Cecilia"

    def test_user_data(self):
        data = StaticFixtureProvider().get_user_data(18)
        assert data.profile.first_name == "Cecilia"
        assert data.key_data.calorie_count == 2500
        assert data.score == 0.3

    def test_activity_days_are_sequential(self):
        points = StaticFixtureProvider().get_user_activity(12)
        assert [p.day for p in points] == list(range(1, 8))

    def test_unknown_user(self):
        provider = StaticFixtureProvider()
        assert provider.get_user_data(99) is None
        assert provider.get_user_activity(99) is None
        assert provider.get_user_average_sessions(99) is None
        assert provider.get_user_performance(99) is None

    def test_returns_fresh_objects(self):
        provider = StaticFixtureProvider()
        first = provider.get_user_activity(12)
        first[0].kilogram = 1
        assert provider.get_user_activity(12)[0].kilogram == 80
