"""Credentials holder and provider capability."""

import logging

from psn import AuthManager, CredentialsProvider, Profile
from psn.logging import ProjectFilter, setup_logging


class TestAuthManager:
    async def test_should_expose_token_and_online_id(self):
        auth = AuthManager(token="abc", online_id="me")

        assert await auth.get_token() == "abc"
        assert await auth.get_online_id() == "me"
        assert isinstance(auth, CredentialsProvider)

    async def test_should_take_online_id_from_profile(self):
        auth = AuthManager(token="abc", profile=Profile(online_id="me"))

        assert await auth.get_online_id() == "me"
        assert auth.profile.online_id == "me"

    async def test_should_replace_token(self):
        auth = AuthManager(token="abc")

        auth.update_token("def")

        assert await auth.get_token() == "def"

    async def test_should_switch_account_with_profile(self):
        auth = AuthManager(token="abc", online_id="me")

        auth.set_profile(Profile(online_id="other"))

        assert await auth.get_online_id() == "other"

    def test_should_report_unauthenticated_without_token(self):
        assert not AuthManager().is_authenticated()


class TestLogging:
    def test_should_only_pass_package_records(self):
        project_filter = ProjectFilter("psn")

        def record(name):
            return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)

        assert project_filter.filter(record("psn.api.base"))
        assert project_filter.filter(record("psn"))
        assert not project_filter.filter(record("psnext"))
        assert not project_filter.filter(record("httpx"))

    def test_should_write_package_debug_records(self, tmp_path):
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        try:
            setup_logging(tmp_path, level="WARNING")
            logging.getLogger("psn.test").debug("hello from psn")
            logging.getLogger("httpx").debug("hello from httpx")
            for handler in root.handlers:
                handler.flush()

            debug_log = (tmp_path / "debug.log").read_text()
            assert "hello from psn" in debug_log
            assert "hello from httpx" not in debug_log
            assert (tmp_path / "error.log").exists()
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
