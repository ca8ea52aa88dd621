"""Settings sources and client construction from settings."""

import logging

import httpx
import pytest

from psn import AuthManager, PSNClient, Profile
from psn.config import Settings, get_config_file


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path, monkeypatch):
    """Point PSN_HOME at an empty directory and drop any PSN_* variables."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PSN_HOME", str(tmp_path / "home"))
    for name in ("PSN_AUTHORIZATION_TOKEN", "PSN_ONLINE_ID", "PSN_TIMEOUT", "PSN_LOG_DIR"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    def test_should_use_defaults(self):
        settings = Settings()

        assert settings.authorization_token is None
        assert settings.timeout == 30.0
        assert settings.np_language == "en"
        assert settings.log_dir is None

    def test_should_read_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("PSN_AUTHORIZATION_TOKEN", "env-token")
        monkeypatch.setenv("PSN_ONLINE_ID", "me")
        monkeypatch.setenv("PSN_TIMEOUT", "5")

        settings = Settings()

        assert settings.authorization_token == "env-token"
        assert settings.online_id == "me"
        assert settings.timeout == 5.0

    def test_should_read_toml_file_under_home(self, tmp_path):
        home = tmp_path / "home"
        home.mkdir()
        (home / "config.toml").write_text('online_id = "from_toml"\nnp_language = "fr"\n')

        settings = Settings()

        assert get_config_file() == home / "config.toml"
        assert settings.online_id == "from_toml"
        assert settings.np_language == "fr"

    def test_should_prefer_environment_over_toml(self, tmp_path, monkeypatch):
        home = tmp_path / "home"
        home.mkdir()
        (home / "config.toml").write_text('online_id = "from_toml"\n')
        monkeypatch.setenv("PSN_ONLINE_ID", "from_env")

        assert Settings().online_id == "from_env"


class TestFromSettings:
    def test_should_build_auth_manager_from_settings(self):
        auth = AuthManager.from_settings(Settings(authorization_token="abc", online_id="me"))

        assert auth.is_authenticated()

    async def test_should_configure_client(self):
        settings = Settings(authorization_token="abc", online_id="me", np_language="de")
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json={"totalResults": 0, "trophyTitles": []})

        async with PSNClient.from_settings(settings, transport=httpx.MockTransport(handler)) as psn:
            user = psn.user_from_profile(Profile(online_id="target"))
            await user.compare_trophies()

        assert requests[0].headers["Authorization"] == "Bearer abc"
        assert requests[0].url.params["npLanguage"] == "de"

    def test_should_set_up_logging_when_log_dir_configured(self, tmp_path):
        root = logging.getLogger()
        saved = list(root.handlers)
        try:
            PSNClient.from_settings(Settings(authorization_token="abc", log_dir=tmp_path / "logs"))

            assert (tmp_path / "logs" / "debug.log").exists()
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers[:] = saved
