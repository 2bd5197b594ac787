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
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest before running tests.
All fixtures defined here are available to every test module without
explicit imports.
"""

from __future__ import annotations

import json
import textwrap
from pathlib import Path

import pytest

from modreq.config.config import Config
from modreq.core.models import ModuleRecord
from modreq.core.transports.resolver import SourceResolver

# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clean_modreq_env(monkeypatch):
    """Keep a developer's MODREQ_* settings out of the tests."""
    for var in (
        "MODREQ_SSH_IDENTITY_FILE",
        "MODREQ_SSH_HOST_KEY_POLICY",
        "MODREQ_GO_BINARY",
        "MODREQ_OUTPUT_FORMAT",
    ):
        monkeypatch.delenv(var, raising=False)


# ---------------------------------------------------------------------------
# Inventory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def inventory() -> list[ModuleRecord]:
    """A small resolved inventory: one module behind upstream, two at latest."""
    return [
        ModuleRecord(path="example.com/app", version=""),
        ModuleRecord(path="github.com/pkg/errors", version="v0.9.1"),
        ModuleRecord(path="golang.org/x/text", version="v0.3.0", update="v0.3.7"),
        ModuleRecord(path="gopkg.in/yaml.v2", version="v2.4.0"),
    ]


@pytest.fixture
def write_inventory(tmp_path: Path):
    """Factory fixture writing ``go list -m -u -json all`` style output.

    Usage::

        path = write_inventory([
            {"Path": "golang.org/x/text", "Version": "v0.3.0"},
        ])
    """
    _counter = [0]

    def _write(modules: list[dict]) -> Path:
        _counter[0] += 1
        path = tmp_path / f"modules-{_counter[0]}.json"
        path.write_text("\n".join(json.dumps(m, indent="\t") for m in modules) + "\n", encoding="utf-8")
        return path

    return _write


# ---------------------------------------------------------------------------
# Requirements fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def write_requirements(tmp_path: Path):
    """Factory fixture for requirements files; returns the ``file://`` URI.

    Usage::

        location = write_requirements('''
            required:
              github.com/pkg/errors: ^v0\\.9\\.
        ''')
    """
    _counter = [0]

    def _write(yaml_str: str, name: str | None = None) -> str:
        _counter[0] += 1
        path = tmp_path / (name or f"requirements-{_counter[0]}.yml")
        path.write_text(textwrap.dedent(yaml_str), encoding="utf-8")
        return path.as_uri()

    return _write


class FakeResolver(SourceResolver):
    """Resolver serving documents from memory and recording every fetch."""

    def __init__(self, documents: dict[str, str | bytes]):
        super().__init__(config=Config())
        self.documents = documents
        self.fetched: list[str] = []

    def fetch(self, location: str) -> bytes:
        self.fetched.append(location)
        if location not in self.documents:
            return super().fetch(location)
        doc = self.documents[location]
        return doc.encode("utf-8") if isinstance(doc, str) else doc


@pytest.fixture
def make_resolver():
    """Factory fixture returning a :class:`FakeResolver`."""

    def _make(documents: dict[str, str | bytes]) -> FakeResolver:
        return FakeResolver({loc: textwrap.dedent(doc) if isinstance(doc, str) else doc for loc, doc in documents.items()})

    return _make
