"""Tests for site.toml loading and session state helpers.

Run with: pytest test_site_config.py
"""

import logging
from unittest.mock import patch

from lib import session_state
from lib.site_config import PROJECT_ROOT, SiteConfig


class TestSiteConfig:
    """Loading and defaults."""

    def test_missing_file_uses_defaults(self, tmp_path):
        config = SiteConfig(config_file=str(tmp_path / "absent.toml"))
        assert config.title == "FileLens Docs"
        assert config.default_page == "index"
        assert config.docs_dir == PROJECT_ROOT / "docs"
        assert config.nav == []
        assert config.log_level == logging.INFO

    def test_values_override_defaults(self, tmp_path):
        path = tmp_path / "site.toml"
        path.write_text(
            '[site]\ntitle = "Custom"\nnav = ["a", "b"]\n\n[logging]\nlevel = "debug"\n',
            encoding="utf-8",
        )
        config = SiteConfig(config_file=str(path))
        assert config.title == "Custom"
        assert config.nav == ["a", "b"]
        assert config.log_level == logging.DEBUG
        # Keys not in the file keep their defaults
        assert config.default_page == "index"

    def test_invalid_toml_falls_back(self, tmp_path):
        path = tmp_path / "site.toml"
        path.write_text("[site\ntitle = ", encoding="utf-8")
        config = SiteConfig(config_file=str(path))
        assert config.title == "FileLens Docs"

    def test_unknown_log_level(self, tmp_path):
        path = tmp_path / "site.toml"
        path.write_text('[logging]\nlevel = "LOUD"\n', encoding="utf-8")
        assert SiteConfig(config_file=str(path)).log_level == logging.INFO

    def test_absolute_docs_dir(self, tmp_path):
        path = tmp_path / "site.toml"
        path.write_text(f'[site]\ndocs_dir = "{tmp_path.as_posix()}"\n', encoding="utf-8")
        assert SiteConfig(config_file=str(path)).docs_dir == tmp_path

    def test_env_var_override(self, tmp_path, monkeypatch):
        path = tmp_path / "other.toml"
        path.write_text('[site]\ntitle = "From Env"\n', encoding="utf-8")
        monkeypatch.setenv("FILELENS_DOCS_CONFIG", str(path))
        assert SiteConfig().title == "From Env"

    def test_bundled_config(self):
        config = SiteConfig(config_file=str(PROJECT_ROOT / "site.toml"))
        assert config.nav[0] == config.default_page == "index"


class TestSessionState:
    """Session state helpers over a plain dict."""

    def test_initialize_keeps_existing_values(self):
        state = {'current_page': 'docker'}
        with patch.object(session_state.st, 'session_state', state):
            session_state.initialize_session_state()
        assert state['current_page'] == 'docker'
        assert state['show_toc'] is True

    def test_get_set_has(self):
        state = {}
        with patch.object(session_state.st, 'session_state', state):
            assert session_state.get_state('missing', 'fallback') == 'fallback'
            session_state.set_state('key', 1)
            assert session_state.has_state('key')
            assert session_state.get_state('key') == 1

    def test_navigate_to(self):
        state = {'current_page': 'index'}
        with patch.object(session_state.st, 'session_state', state):
            session_state.navigate_to('docker')
        assert state['current_page'] == 'docker'
