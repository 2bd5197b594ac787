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
Local filesystem transport for ``file://`` requirement sources.
"""

import logging
from pathlib import Path
from urllib.parse import SplitResult, unquote

from ..exceptions import SourceNotFoundError, SourceReadError

logger = logging.getLogger(__name__)


def fetch_file(uri: SplitResult) -> bytes:
    """
    Read a requirements file from the local filesystem.

    Args:
        uri: Parsed ``file://`` URI; only its path is used

    Returns:
        Raw file contents

    Raises:
        SourceNotFoundError: If the file does not exist
        SourceReadError: If the file exists but cannot be read
    """
    location = uri.geturl()
    path = Path(unquote(uri.path))

    if not path.exists():
        raise SourceNotFoundError(f"file does not exist {path}", location)

    try:
        data = path.read_bytes()
    except OSError as e:
        raise SourceReadError(f"problem reading file {path} [{e}]", location) from e

    logger.debug("Read %d bytes from %s", len(data), path)
    return data
