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

r"""
Requirements document loader.

A requirements document is YAML with two optional sections::

    required:
      github.com/pkg/errors: ^v0\.9\.
      golang.org/x/sys: latest
    banned:
      github.com/gogo/protobuf:
        - ^v1\.0\.
        - latest

Unknown top-level keys are ignored.
"""

import logging
from typing import Any

import yaml

from .exceptions import RequirementsParseError
from .models import RequirementSpec, VersionRule
from .transports.resolver import SourceResolver

logger = logging.getLogger(__name__)


def _rule_from_value(value: Any, where: str, location: str) -> VersionRule:
    if isinstance(value, (dict, list)) or value is None:
        raise RequirementsParseError(
            f"unable to parse requirements file {location} [{where}: rule must be a string]", location
        )
    if isinstance(value, bool):
        return VersionRule(str(value).lower())
    return VersionRule(str(value))


def _parse_required(section: Any, location: str) -> dict[str, VersionRule]:
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise RequirementsParseError(
            f"unable to parse requirements file {location} [required: expected a mapping of module to rule]",
            location,
        )
    return {str(path): _rule_from_value(value, f"required.{path}", location) for path, value in section.items()}


def _parse_banned(section: Any, location: str) -> dict[str, tuple[VersionRule, ...]]:
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise RequirementsParseError(
            f"unable to parse requirements file {location} [banned: expected a mapping of module to rule list]",
            location,
        )
    banned: dict[str, tuple[VersionRule, ...]] = {}
    for path, rules in section.items():
        if rules is None:
            banned[str(path)] = ()
            continue
        if not isinstance(rules, list):
            raise RequirementsParseError(
                f"unable to parse requirements file {location} [banned.{path}: expected a list of rules]",
                location,
            )
        banned[str(path)] = tuple(
            _rule_from_value(value, f"banned.{path}[{i}]", location) for i, value in enumerate(rules)
        )
    return banned


def parse_requirements(data: bytes | str, location: str = "<memory>") -> RequirementSpec:
    """
    Decode a requirements document.

    Args:
        data: Raw YAML bytes as fetched from the source
        location: Where the bytes came from, used in error messages

    Returns:
        Immutable RequirementSpec

    Raises:
        RequirementsParseError: If the document is malformed
    """
    try:
        raw = yaml.safe_load(data)
    except yaml.YAMLError as e:
        raise RequirementsParseError(f"unable to parse requirements file {location} [{e}]", location) from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise RequirementsParseError(
            f"unable to parse requirements file {location} [top level must be a mapping]", location
        )

    spec = RequirementSpec(
        required=_parse_required(raw.get("required"), location),
        banned=_parse_banned(raw.get("banned"), location),
        location=location,
    )
    logger.debug(
        "Loaded %d required and %d banned module rules from %s", len(spec.required), len(spec.banned), location
    )
    return spec


def load_requirements(location: str, resolver: SourceResolver | None = None) -> RequirementSpec:
    """
    Fetch and decode the requirements document at *location*.

    Raises:
        SourceError: If the document cannot be fetched
        RequirementsParseError: If the document is malformed
    """
    resolver = resolver or SourceResolver()
    data = resolver.fetch(location)
    return parse_requirements(data, location)
