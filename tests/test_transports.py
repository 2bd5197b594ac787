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

"""Tests for source resolution and the file and HTTP transports."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urlsplit

import httpx
import pytest

from modreq.config.config import Config
from modreq.core.exceptions import (
    InvalidLocationError,
    SourceNotFoundError,
    SourceReadError,
    UnsupportedSchemeError,
)
from modreq.core.transports.file_transport import fetch_file
from modreq.core.transports.http_transport import HTTPTransport
from modreq.core.transports.resolver import SourceResolver, normalize_location, parse_location


def _mock_client_factory(handler):
    """Return a client factory whose clients answer from *handler*."""

    def _factory(**kwargs):
        return httpx.Client(transport=httpx.MockTransport(handler), **kwargs)

    return _factory


class TestParseLocation:
    def test_absolute_uri(self):
        uri = parse_location("https://example.com/reqs/.gomodreq.yml")
        assert uri.scheme == "https"
        assert uri.path == "/reqs/.gomodreq.yml"

    def test_absolute_path_has_no_scheme(self):
        assert parse_location("/etc/modreq.yml").scheme == ""

    @pytest.mark.parametrize("location", ["", "relative/path.yml", ".gomodreq.yml"])
    def test_relative_rejected(self, location):
        with pytest.raises(InvalidLocationError):
            parse_location(location)


class TestNormalizeLocation:
    def test_uri_untouched(self):
        assert normalize_location("ssh://u@h/p.yml") == "ssh://u@h/p.yml"

    def test_relative_path_becomes_file_uri(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert normalize_location("reqs.yml") == (tmp_path.resolve() / "reqs.yml").as_uri()


class TestFileTransport:
    def test_reads_bytes(self, tmp_path):
        path = tmp_path / "r.yml"
        path.write_bytes(b"required: {}\n")
        assert fetch_file(urlsplit(path.as_uri())) == b"required: {}\n"

    def test_missing_file(self, tmp_path):
        uri = urlsplit((tmp_path / "nope.yml").as_uri())
        with pytest.raises(SourceNotFoundError, match="file does not exist"):
            fetch_file(uri)

    def test_read_failure_distinct_from_missing(self, tmp_path, monkeypatch):
        path = tmp_path / "r.yml"
        path.write_text("required: {}\n")

        def _deny(self):
            raise PermissionError("permission denied")

        monkeypatch.setattr(Path, "read_bytes", _deny)
        with pytest.raises(SourceReadError, match="problem reading file") as exc_info:
            fetch_file(urlsplit(path.as_uri()))
        assert not isinstance(exc_info.value, SourceNotFoundError)

    def test_percent_encoded_path(self, tmp_path):
        path = tmp_path / "with space.yml"
        path.write_bytes(b"banned: {}\n")
        assert fetch_file(urlsplit(path.as_uri())) == b"banned: {}\n"


class TestHTTPTransport:
    def test_returns_body(self):
        transport = HTTPTransport(
            client_factory=_mock_client_factory(lambda request: httpx.Response(200, content=b"required: {}\n"))
        )
        assert transport.fetch(urlsplit("https://example.com/r.yml")) == b"required: {}\n"

    def test_body_returned_regardless_of_status(self):
        transport = HTTPTransport(
            client_factory=_mock_client_factory(lambda request: httpx.Response(404, content=b"not found"))
        )
        assert transport.fetch(urlsplit("http://example.com/r.yml")) == b"not found"

    def test_single_get(self):
        requests = []

        def handler(request):
            requests.append((request.method, str(request.url)))
            return httpx.Response(200, content=b"")

        HTTPTransport(client_factory=_mock_client_factory(handler)).fetch(urlsplit("https://example.com/r.yml"))
        assert requests == [("GET", "https://example.com/r.yml")]

    def test_connection_failure(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        transport = HTTPTransport(client_factory=_mock_client_factory(handler))
        with pytest.raises(SourceReadError, match="unable to get webpage") as exc_info:
            transport.fetch(urlsplit("https://example.com/r.yml"))
        assert exc_info.value.location == "https://example.com/r.yml"

    def test_read_failure(self):
        def handler(request):
            raise httpx.ReadError("connection reset", request=request)

        transport = HTTPTransport(client_factory=_mock_client_factory(handler))
        with pytest.raises(SourceReadError, match="unable to read response"):
            transport.fetch(urlsplit("https://example.com/r.yml"))


class TestSourceResolver:
    def test_dispatches_file(self, tmp_path):
        path = tmp_path / "r.yml"
        path.write_bytes(b"x: 1\n")
        assert SourceResolver(Config()).fetch(path.as_uri()) == b"x: 1\n"

    @pytest.mark.parametrize("scheme", ["http", "https"])
    def test_dispatches_http(self, scheme):
        http = HTTPTransport(client_factory=_mock_client_factory(lambda request: httpx.Response(200, content=b"ok")))
        resolver = SourceResolver(Config(), http_transport=http)
        assert resolver.fetch(f"{scheme}://example.com/r.yml") == b"ok"

    def test_dispatches_ssh(self):
        class _RecordingSSH:
            def __init__(self):
                self.uris = []

            def fetch(self, uri):
                self.uris.append(uri)
                return b"remote"

        ssh = _RecordingSSH()
        resolver = SourceResolver(Config(), ssh_transport=ssh)  # type: ignore[arg-type]
        assert resolver.fetch("ssh://deploy@config.example.com/etc/r.yml") == b"remote"
        assert ssh.uris[0].hostname == "config.example.com"

    @pytest.mark.parametrize("location", ["ftp://example.com/r.yml", "s3://bucket/r.yml", "/etc/modreq/r.yml"])
    def test_unsupported_scheme(self, location):
        def handler(request):
            raise AssertionError("no transport may be attempted")

        http = HTTPTransport(client_factory=_mock_client_factory(handler))
        with pytest.raises(UnsupportedSchemeError) as exc_info:
            SourceResolver(Config(), http_transport=http).fetch(location)
        assert exc_info.value.location == location
