# Copyright 2026 Cisco Systems, Inc.
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
Configuration class for modreq.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .constants import ModReqConstants


@dataclass
class Config:
    """
    Configuration for a modreq run.

    Explicit values win; anything left as None is filled from the environment
    in ``__post_init__``, then from the built-in defaults.
    """

    # SSH source configuration
    ssh_identity_file: Path | None = None
    # Unset falls back to accept-any, which never verifies host keys
    ssh_host_key_policy: str | None = None

    # Inventory resolution
    go_binary: str | None = None
    workdir: Path | None = None
    inventory_file: str | None = None

    # Output Options
    output_format: str | None = None
    verbose: bool = False

    def __post_init__(self):
        """Load configuration from environment variables if not provided."""

        if self.ssh_identity_file is None:
            if env_identity := os.getenv("MODREQ_SSH_IDENTITY_FILE"):
                self.ssh_identity_file = Path(env_identity).expanduser()
            else:
                self.ssh_identity_file = ModReqConstants.default_identity_file()
        else:
            self.ssh_identity_file = Path(self.ssh_identity_file).expanduser()

        if self.ssh_host_key_policy is None:
            env_policy = os.getenv("MODREQ_SSH_HOST_KEY_POLICY")
            self.ssh_host_key_policy = env_policy.lower() if env_policy else ModReqConstants.HOST_KEY_ACCEPT_ANY

        if self.ssh_host_key_policy not in ModReqConstants.HOST_KEY_POLICIES:
            raise ValueError(
                f"Unknown SSH host key policy '{self.ssh_host_key_policy}'. "
                f"Available: {', '.join(ModReqConstants.HOST_KEY_POLICIES)}"
            )

        if self.go_binary is None:
            self.go_binary = os.getenv("MODREQ_GO_BINARY") or ModReqConstants.DEFAULT_GO_BINARY

        if self.output_format is None:
            env_format = os.getenv("MODREQ_OUTPUT_FORMAT")
            self.output_format = env_format.lower() if env_format else "summary"

        if self.output_format not in ModReqConstants.OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format '{self.output_format}'. "
                f"Available: {', '.join(ModReqConstants.OUTPUT_FORMATS)}"
            )

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create configuration from environment variables.

        Returns:
            Config instance with values from environment
        """
        return cls()

    @classmethod
    def from_file(cls, config_file: Path) -> "Config":
        """
        Load configuration from .env file.

        Args:
            config_file: Path to .env file

        Returns:
            Config instance
        """
        if config_file.exists():
            load_dotenv(config_file, override=True)

        return cls.from_env()
