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

"""modreq exceptions.

All fatal conditions raised while fetching, parsing or evaluating requirement
sources inherit from ModReqError. Policy violations are not exceptions; they
are reported as findings.

Example:
    >>> from modreq.core.exceptions import ModReqError, SourceError
    >>> from modreq.core.requirements import load_requirements
    >>>
    >>> try:
    ...     spec = load_requirements("ftp://example.com/.gomodreq.yml")
    ... except SourceError as e:
    ...     print(f"Failed to fetch {e.location}: {e}")
"""


class ModReqError(Exception):
    """Base exception for all modreq errors."""

    pass


class SourceError(ModReqError):
    """Raised when requirement bytes cannot be fetched from a location.

    Every transport failure carries the location it was trying to read.
    """

    def __init__(self, message: str, location: str):
        super().__init__(message)
        self.location = location


class InvalidLocationError(SourceError):
    """Raised when a location is neither an absolute URI nor an absolute path."""

    pass


class UnsupportedSchemeError(SourceError):
    """Raised for URI schemes no transport handles. Nothing is attempted."""

    def __init__(self, scheme: str, location: str):
        super().__init__(f"unsupported uri scheme: {scheme or '<none>'}", location)
        self.scheme = scheme


class SourceNotFoundError(SourceError):
    """Raised when a local requirements file does not exist."""

    pass


class SourceReadError(SourceError):
    """Raised when a source exists but reading it fails.

    This covers:
    - Unreadable local files
    - HTTP connection and read failures
    """

    pass


class SSHError(SourceError):
    """Base class for remote-shell transport failures."""

    pass


class SSHAuthError(SSHError):
    """Raised when the local identity file cannot be read or parsed."""

    pass


class SSHConnectionError(SSHError):
    """Raised when connecting or authenticating to the remote host fails."""

    pass


class SSHCommandError(SSHError):
    """Raised when the remote read command fails or exits non-zero."""

    def __init__(self, message: str, location: str, exit_status: int | None = None, output: bytes = b""):
        super().__init__(message, location)
        self.exit_status = exit_status
        self.output = output


class RequirementsParseError(ModReqError):
    """Raised when a requirements document is malformed."""

    def __init__(self, message: str, location: str):
        super().__init__(message)
        self.location = location


class RuleCompileError(ModReqError):
    """Raised when a version rule is not a valid regular expression.

    A malformed rule is an operator error and aborts the whole run.
    """

    def __init__(self, pattern: str, reason: str):
        super().__init__(f"unable to compile regex {pattern} [{reason}]")
        self.pattern = pattern
        self.reason = reason


class InventoryError(ModReqError):
    """Raised when the module inventory cannot be resolved or decoded."""

    pass
