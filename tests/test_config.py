# Copyright 2026 Cisco Systems, Inc. and its affiliates
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
#
# SPDX-License-Identifier: Apache-2.0

"""
Tests for configuration module.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from modreq.config.config import Config
from modreq.config.constants import ModReqConstants


class TestConfigInitialization:
    """Test Config class initialization."""

    def test_config_with_defaults(self):
        config = Config()

        assert config.ssh_identity_file == Path("~/.ssh/id_rsa").expanduser()
        assert config.ssh_host_key_policy == "accept-any"
        assert config.go_binary == "go"
        assert config.output_format == "summary"
        assert config.inventory_file is None

    def test_config_with_custom_values(self):
        config = Config(
            ssh_identity_file=Path("/keys/deploy"),
            ssh_host_key_policy="reject",
            go_binary="/usr/local/go/bin/go",
            output_format="json",
        )

        assert config.ssh_identity_file == Path("/keys/deploy")
        assert config.ssh_host_key_policy == "reject"
        assert config.go_binary == "/usr/local/go/bin/go"
        assert config.output_format == "json"

    def test_config_from_env_variables(self):
        with patch.dict(
            "os.environ",
            {
                "MODREQ_SSH_IDENTITY_FILE": "/keys/ci_ed25519",
                "MODREQ_SSH_HOST_KEY_POLICY": "WARN",
                "MODREQ_GO_BINARY": "go1.22",
                "MODREQ_OUTPUT_FORMAT": "markdown",
            },
        ):
            config = Config.from_env()

            assert config.ssh_identity_file == Path("/keys/ci_ed25519")
            assert config.ssh_host_key_policy == "warn"
            assert config.go_binary == "go1.22"
            assert config.output_format == "markdown"

    def test_explicit_values_beat_env(self):
        with patch.dict("os.environ", {"MODREQ_SSH_IDENTITY_FILE": "/keys/env"}):
            config = Config(ssh_identity_file=Path("/keys/explicit"))
            assert config.ssh_identity_file == Path("/keys/explicit")

    @pytest.mark.parametrize(
        ("field", "explicit", "env_var", "env_value"),
        [
            ("ssh_host_key_policy", "accept-any", "MODREQ_SSH_HOST_KEY_POLICY", "reject"),
            ("ssh_host_key_policy", "reject", "MODREQ_SSH_HOST_KEY_POLICY", "accept-any"),
            ("output_format", "summary", "MODREQ_OUTPUT_FORMAT", "json"),
            ("go_binary", "go", "MODREQ_GO_BINARY", "/opt/go/bin/go"),
        ],
    )
    def test_explicit_default_value_beats_env(self, monkeypatch, field, explicit, env_var, env_value):
        monkeypatch.setenv(env_var, env_value)
        config = Config(**{field: explicit})
        assert getattr(config, field) == explicit

    def test_unset_values_fall_back_to_env(self, monkeypatch):
        monkeypatch.setenv("MODREQ_SSH_HOST_KEY_POLICY", "reject")
        monkeypatch.setenv("MODREQ_OUTPUT_FORMAT", "json")
        config = Config()
        assert config.ssh_host_key_policy == "reject"
        assert config.output_format == "json"

    def test_invalid_host_key_policy(self):
        with pytest.raises(ValueError, match="Unknown SSH host key policy"):
            Config(ssh_host_key_policy="yolo")

    def test_invalid_output_format(self):
        with pytest.raises(ValueError, match="Unknown output format"):
            Config(output_format="xml")


class TestConfigFromFile:
    def test_from_env_file(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("# modreq settings\nMODREQ_GO_BINARY=/opt/go/bin/go\nMODREQ_SSH_HOST_KEY_POLICY=reject\n")
        # Registered with monkeypatch so the values loaded from the file are undone afterwards
        monkeypatch.setenv("MODREQ_GO_BINARY", "go")
        monkeypatch.setenv("MODREQ_SSH_HOST_KEY_POLICY", "accept-any")

        config = Config.from_file(env_file)

        assert config.go_binary == "/opt/go/bin/go"
        assert config.ssh_host_key_policy == "reject"

    def test_missing_env_file_uses_environment(self, tmp_path):
        config = Config.from_file(tmp_path / "absent.env")
        assert config.go_binary == "go"


class TestConstants:
    def test_default_requirements_location(self, tmp_path):
        location = ModReqConstants.default_requirements_location(tmp_path)
        assert location == (tmp_path.resolve() / ".gomodreq.yml").as_uri()
        assert location.startswith("file://")

    def test_exit_codes_are_distinct_bits(self):
        assert ModReqConstants.EXIT_REQUIRED_VIOLATION & ModReqConstants.EXIT_BANNED_VIOLATION == 0
        assert ModReqConstants.EXIT_FATAL < 0
