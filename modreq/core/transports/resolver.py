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
Scheme dispatch for requirement sources.

Each supported scheme maps to exactly one transport; anything else is
refused before any I/O happens.
"""

import logging
from collections.abc import Callable
from pathlib import Path
from urllib.parse import SplitResult, urlsplit

from ...config.config import Config
from ..exceptions import InvalidLocationError, UnsupportedSchemeError
from .file_transport import fetch_file
from .http_transport import HTTPTransport
from .ssh_transport import SSHTransport

logger = logging.getLogger(__name__)

SUPPORTED_SCHEMES = ("file", "http", "https", "ssh")


def parse_location(location: str) -> SplitResult:
    """
    Parse a requirement-source location into URI components.

    The location must be an absolute URI (``scheme://...``) or an absolute
    path; an absolute path has no scheme and is refused by the resolver.

    Raises:
        InvalidLocationError: If the location cannot be parsed
    """
    if not location:
        raise InvalidLocationError("empty requirements location", location)
    try:
        uri = urlsplit(location)
    except ValueError as e:
        raise InvalidLocationError(f"unable to parse uri {location} [{e}]", location) from e
    if not uri.scheme and not location.startswith("/"):
        raise InvalidLocationError(f"unable to parse uri {location} [not an absolute uri or path]", location)
    return uri


def normalize_location(location: str) -> str:
    """Turn a bare filesystem path into a ``file://`` URI; leave URIs untouched."""
    if "://" in location:
        return location
    return Path(location).expanduser().resolve().as_uri()


class SourceResolver:
    """Fetches raw requirement bytes from any supported location."""

    def __init__(
        self,
        config: Config | None = None,
        http_transport: HTTPTransport | None = None,
        ssh_transport: SSHTransport | None = None,
    ):
        """
        Initialize the resolver.

        Args:
            config: Run configuration (SSH identity file and host key policy)
            http_transport: Transport used for http and https
            ssh_transport: Transport used for ssh
        """
        config = config or Config()
        http_transport = http_transport or HTTPTransport()
        ssh_transport = ssh_transport or SSHTransport(
            identity_file=config.ssh_identity_file,
            host_key_policy=config.ssh_host_key_policy,
        )
        self._transports: dict[str, Callable[[SplitResult], bytes]] = {
            "file": fetch_file,
            "http": http_transport.fetch,
            "https": http_transport.fetch,
            "ssh": ssh_transport.fetch,
        }

    def fetch(self, location: str) -> bytes:
        """
        Fetch the bytes stored at *location*.

        Raises:
            InvalidLocationError: If the location is not a valid absolute URI
            UnsupportedSchemeError: If no transport handles the scheme
            SourceError: Any transport-specific failure
        """
        uri = parse_location(location)
        transport = self._transports.get(uri.scheme)
        if transport is None:
            raise UnsupportedSchemeError(uri.scheme, location)

        logger.debug("Fetching %s via %s transport", location, uri.scheme)
        return transport(uri)
