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
HTTP(S) transport for remote requirement sources.

Issues a single GET per fetch. The response body is returned as-is whatever
the status code; only transport-level failures are errors.
"""

import logging
from collections.abc import Callable
from urllib.parse import SplitResult

import httpx

from ..exceptions import SourceReadError

logger = logging.getLogger(__name__)


class HTTPTransport:
    """Fetches requirement bytes over HTTP or HTTPS."""

    def __init__(self, client_factory: Callable[..., httpx.Client] = httpx.Client):
        """
        Initialize HTTP transport.

        Args:
            client_factory: Callable returning an ``httpx.Client``; swapped out in tests
        """
        self.client_factory = client_factory

    def fetch(self, uri: SplitResult) -> bytes:
        """
        GET the resource at *uri*.

        Raises:
            SourceReadError: On connection or read failure
        """
        url = uri.geturl()
        try:
            with self.client_factory(follow_redirects=True) as client:
                response = client.get(url)
                body = response.content
        except httpx.ReadError as e:
            raise SourceReadError(f"unable to read response from {url} [{e}]", url) from e
        except httpx.HTTPError as e:
            raise SourceReadError(f"unable to get webpage {url} [{e}]", url) from e

        logger.debug("GET %s -> %s (%d bytes)", url, response.status_code, len(body))
        return body
