import logging

from draft.config import MockStrategy, NameConvention, Settings, settings
from draft.log import get_logger
from draft.reflect.item import Options
from draft.scheme import Scheme


class TestSettings:
    def test_defaults(self, monkeypatch):
        for var in ("DRAFT_NAME_CONVENTION", "DRAFT_MOCK_STRATEGY", "DRAFT_MOCK_SEED", "DRAFT_LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)
        s = Settings(_env_file=None)
        assert s.name_convention == NameConvention.SNAKE_CASE
        assert s.mock_strategy == MockStrategy.EXAMPLE
        assert s.mock_seed == 0
        assert s.log_level == "WARNING"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("DRAFT_NAME_CONVENTION", "camel_case")
        monkeypatch.setenv("DRAFT_MOCK_SEED", "9")
        s = Settings(_env_file=None)
        assert s.name_convention == NameConvention.CAMEL_CASE
        assert s.mock_seed == 9

    def test_export_follows_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "name_convention", NameConvention.AS_IS)
        assert Options.from_settings().name_convention == NameConvention.AS_IS

        scheme = Scheme()
        scheme.case(200, "ok", lambda c: c.body({"userId": 1}))
        assert set(scheme.to_json().detail[200].response.body) == {"userId"}


class TestLogging:
    def test_get_logger(self):
        logger = get_logger("draft.scheme")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "draft.scheme"

    def test_commit_logs_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="draft.scheme"):
            Scheme().url("/users").case(200, "ok")
        assert "Recorded case 'ok'" in caplog.text
