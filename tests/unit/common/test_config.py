# Copyright 2026 Dell Inc. or its subsidiaries. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Unit tests for configuration loading."""

import pytest

from stager.common.config import DEFAULT_CPU_WEIGHT, DEFAULT_LANG, default_config, load_config

VALID_INI = """\
[opi]
url = https://opi.internal:8085/
cc_uploader_url = http://cc-uploader.internal:9090
timeout_seconds = 30

[internal_api]
auth_user = intuser
auth_password = p%ss@word

[server]
internal_service_hostname = cc.internal
tls_port = 8443

[staging]
cpu_weight = 75
default_lang = C.UTF-8
"""


def _write(tmp_path, content):
    path = tmp_path / "stager.ini"
    path.write_text(content)
    return str(path)


class TestLoadConfig:
    """Test cases for load_config."""

    def test_valid_file(self, tmp_path):
        """Test that every section is parsed."""
        config = load_config(_write(tmp_path, VALID_INI))

        assert config.opi.url == "https://opi.internal:8085"
        assert config.opi.cc_uploader_url == "http://cc-uploader.internal:9090"
        assert config.opi.timeout_seconds == 30.0
        assert config.opi.ca_file is None
        assert config.internal_api.auth_user == "intuser"
        assert config.internal_api.auth_password == "p%ss@word"
        assert config.server.internal_service_hostname == "cc.internal"
        assert config.server.tls_port == 8443
        assert config.staging.cpu_weight == 75
        assert config.staging.default_lang == "C.UTF-8"

    def test_staging_defaults(self, tmp_path):
        """Test defaults when the staging section is absent."""
        content = VALID_INI.split("[staging]")[0]

        config = load_config(_write(tmp_path, content))

        assert config.staging.cpu_weight == DEFAULT_CPU_WEIGHT
        assert config.staging.default_lang == DEFAULT_LANG

    def test_env_var_path(self, tmp_path, monkeypatch):
        """Test that STAGER_CONFIG_PATH is honoured."""
        monkeypatch.setenv("STAGER_CONFIG_PATH", _write(tmp_path, VALID_INI))

        assert load_config().server.tls_port == 8443

    def test_missing_file(self, tmp_path):
        """Test a path that does not exist."""
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "absent.ini"))

    def test_empty_file(self, tmp_path):
        """Test a file with no sections."""
        with pytest.raises(ValueError, match="Empty configuration"):
            load_config(_write(tmp_path, ""))

    def test_missing_required_value(self, tmp_path):
        """Test that a missing password is reported by name."""
        content = VALID_INI.replace("auth_password = p%ss@word\n", "")

        with pytest.raises(ValueError, match="auth_password"):
            load_config(_write(tmp_path, content))

    def test_port_out_of_range(self, tmp_path):
        """Test port validation."""
        content = VALID_INI.replace("tls_port = 8443", "tls_port = 70000")

        with pytest.raises(ValueError, match="tls_port"):
            load_config(_write(tmp_path, content))

    def test_non_positive_timeout(self, tmp_path):
        """Test timeout validation."""
        content = VALID_INI.replace("timeout_seconds = 30", "timeout_seconds = 0")

        with pytest.raises(ValueError, match="timeout_seconds"):
            load_config(_write(tmp_path, content))

    def test_password_not_in_repr(self, tmp_path):
        """Test that the internal API password is hidden from repr."""
        config = load_config(_write(tmp_path, VALID_INI))

        assert "p%ss@word" not in repr(config)


class TestDefaultConfig:
    """Test cases for default_config."""

    def test_development_defaults(self):
        """Test the development configuration."""
        config = default_config()

        assert config.staging.cpu_weight == 50
        assert config.staging.default_lang == "en_US.UTF-8"
        assert config.opi.timeout_seconds is None
