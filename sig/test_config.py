# sig/test_config.py
import logging

import pytest

from sig.config import SigConfig
from sig.errors import ConfigurationError


class TestSigConfig:

    def test_defaults(self):
        config = SigConfig.from_env({})
        assert config == SigConfig()
        assert config.DISABLED is False
        assert config.LOG_LEVEL == logging.WARNING

    @pytest.mark.parametrize("raw, expected", [
        pytest.param("1", True, id="one"),
        pytest.param("TRUE", True, id="upper_true"),
        pytest.param(" yes ", True, id="padded_yes"),
        pytest.param("0", False, id="zero"),
        pytest.param("", False, id="empty"),
    ])
    def test_disable_flag(self, raw, expected):
        assert SigConfig.from_env({"SIG_DISABLE": raw}).DISABLED is expected

    def test_log_level_by_name_and_number(self):
        assert SigConfig.from_env({"SIG_LOG_LEVEL": "debug"}).LOG_LEVEL == logging.DEBUG
        assert SigConfig.from_env({"SIG_LOG_LEVEL": "15"}).LOG_LEVEL == 15

    def test_unknown_log_level(self):
        with pytest.raises(ConfigurationError):
            SigConfig.from_env({"SIG_LOG_LEVEL": "chatty"})

    def test_frozen(self):
        config = SigConfig()
        with pytest.raises(AttributeError):
            config.DISABLED = True


class TestPackageExports:

    @pytest.fixture
    def reload_sig(self, monkeypatch):
        import importlib
        import sig

        def reload(disabled):
            if disabled:
                monkeypatch.setenv("SIG_DISABLE", "1")
            else:
                monkeypatch.delenv("SIG_DISABLE", raising=False)
            return importlib.reload(sig)

        yield reload
        monkeypatch.delenv("SIG_DISABLE", raising=False)
        importlib.reload(sig)

    def test_checking_entry_points_by_default(self, reload_sig):
        from sig import kernel
        package = reload_sig(disabled=False)
        assert package.sig is kernel.sig
        assert package.define is kernel.define

    def test_disabled_exports_no_op(self, reload_sig):
        from sig import none
        package = reload_sig(disabled=True)
        assert package.sig is none.sig
        assert package.sig_self is none.sig_self
        assert package.define is none.define

    def test_bad_log_level_does_not_break_import(self, reload_sig, monkeypatch):
        from sig import kernel
        monkeypatch.setenv("SIG_LOG_LEVEL", "verbose")
        package = reload_sig(disabled=False)
        assert package.sig is kernel.sig
        with pytest.raises(ConfigurationError):
            package.SigConfig.from_env()


def test_disabled_from_env_ignores_log_level():
    from sig.config import disabled_from_env
    assert disabled_from_env({"SIG_DISABLE": "on", "SIG_LOG_LEVEL": "verbose"}) is True
    assert disabled_from_env({"SIG_LOG_LEVEL": "verbose"}) is False
