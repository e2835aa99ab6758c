"""
Web API Settings Tests
======================
Environment overrides for the API server settings.
"""
import pytest


# Importing the web_api package pulls in the FastAPI app
pytest.importorskip("fastapi")


from csharp_review.web_api.config import ENV_PREFIX, Settings


class TestSettings:
    """Tests for web_api.config.Settings"""

    def test_defaults(self):
        s = Settings(environ={})
        assert (s.HOST, s.PORT, s.DEBUG, s.CORS_ORIGINS) == ("127.0.0.1", 8000, False, ["*"])

    def test_prefixed_overrides_are_typed(self):
        s = Settings(environ={
            ENV_PREFIX + "HOST": "0.0.0.0",
            ENV_PREFIX + "PORT": "9000",
            ENV_PREFIX + "DEBUG": "yes",
            ENV_PREFIX + "CORS_ORIGINS": "http://a.test, http://b.test,",
        })

        assert s.HOST == "0.0.0.0"
        assert s.PORT == 9000
        assert s.DEBUG is True
        assert s.CORS_ORIGINS == ["http://a.test", "http://b.test"]

    def test_bare_host_and_port_are_ignored(self):
        s = Settings(environ={"HOST": "build-agent-7", "PORT": "not-a-number"})
        assert (s.HOST, s.PORT) == ("127.0.0.1", 8000)
