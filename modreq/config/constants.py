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
Constants for modreq.
"""

from pathlib import Path

try:
    from .._version import __version__ as PACKAGE_VERSION
except Exception:  # pragma: no cover
    PACKAGE_VERSION = "0.0.0-dev"


class ModReqConstants:
    """Constants used throughout the checker."""

    VERSION = PACKAGE_VERSION

    # Project paths
    PACKAGE_ROOT = Path(__file__).parent.parent

    # Requirement files
    DEFAULT_REQUIREMENTS_FILE = ".gomodreq.yml"
    LATEST = "latest"

    # Exit codes
    EXIT_OK = 0
    EXIT_REQUIRED_VIOLATION = 1
    EXIT_BANNED_VIOLATION = 2
    EXIT_FATAL = -1

    # SSH defaults
    DEFAULT_SSH_PORT = 22
    DEFAULT_SSH_IDENTITY_FILE = Path("~") / ".ssh" / "id_rsa"
    HOST_KEY_ACCEPT_ANY = "accept-any"
    HOST_KEY_WARN = "warn"
    HOST_KEY_REJECT = "reject"
    HOST_KEY_POLICIES = (HOST_KEY_ACCEPT_ANY, HOST_KEY_WARN, HOST_KEY_REJECT)

    # Inventory resolution
    DEFAULT_GO_BINARY = "go"
    GO_LIST_ARGS = ("list", "-m", "-u", "-json", "all")

    # Output
    OUTPUT_FORMATS = ("summary", "json", "markdown")

    @classmethod
    def default_requirements_location(cls, directory: Path | None = None) -> str:
        """Return the ``file://`` URI of the requirements file in *directory* (default: cwd)."""
        base = directory if directory is not None else Path.cwd()
        return (base.resolve() / cls.DEFAULT_REQUIREMENTS_FILE).as_uri()

    @classmethod
    def default_identity_file(cls) -> Path:
        """Get the per-user private key used for SSH sources."""
        return cls.DEFAULT_SSH_IDENTITY_FILE.expanduser()
