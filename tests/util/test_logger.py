import pytest

from springboard.util import logger as logger_module


class TestLogger:
    def test_component_filter(self):
        info = logger_module.logger.level("INFO")
        debug = logger_module.logger.level("DEBUG")

        record = {"extra": {"component": "memoized"}, "level": debug}
        assert not logger_module.component_filter(record)

        record = {"extra": {"component": "memoized"}, "level": info}
        assert logger_module.component_filter(record)

        record = {"extra": {"component": "benchmark"}, "level": debug}
        assert logger_module.component_filter(record)

    def test_formatter_uses_component(self):
        template = logger_module.formatter({"extra": {"component": "network"}})
        assert "network" in template
        assert "{message}" in template

    def test_set_component_level(self):
        previous = logger_module.LEVEL_PER_COMPONENT.get("enumerator")
        try:
            logger_module.set_component_level("enumerator", "DEBUG")
            assert logger_module.LEVEL_PER_COMPONENT["enumerator"] == "DEBUG"
        finally:
            logger_module.LEVEL_PER_COMPONENT["enumerator"] = previous

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError):
            logger_module.set_component_level("enumerator", "CHATTY")
