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
Data models for requirement specs, module inventories and check results.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any

from ..config.constants import ModReqConstants
from .exceptions import RuleCompileError


class Verdict(str, Enum):
    """Outcome of one (module, rule) evaluation."""

    MET = "met"
    VIOLATED = "violated"


class RuleKind(str, Enum):
    """Which section of the requirements document a rule came from."""

    REQUIRED = "required"
    BANNED = "banned"


@dataclass(frozen=True)
class VersionRule:
    """A single version rule: the ``latest`` sentinel or a regular expression."""

    pattern: str

    @property
    def is_latest(self) -> bool:
        return self.pattern == ModReqConstants.LATEST

    def compile(self) -> re.Pattern:
        """Compile the rule as a regular expression.

        Raises:
            RuleCompileError: If the pattern is not a valid regular expression
        """
        try:
            return re.compile(self.pattern)
        except re.error as e:
            raise RuleCompileError(self.pattern, str(e)) from e

    def matches(self, version: str) -> bool:
        """Return True if the pattern matches anywhere in *version*."""
        return self.compile().search(version) is not None

    def __str__(self) -> str:
        return self.pattern


@dataclass(frozen=True)
class RequirementSpec:
    """Required and banned version rules loaded from one requirements document.

    Module paths that appear in neither mapping are never evaluated.
    """

    required: Mapping[str, VersionRule] = field(default_factory=dict)
    banned: Mapping[str, tuple[VersionRule, ...]] = field(default_factory=dict)
    location: str = ""

    def __post_init__(self):
        """Freeze the rule mappings."""
        object.__setattr__(self, "required", MappingProxyType(dict(self.required)))
        object.__setattr__(
            self, "banned", MappingProxyType({path: tuple(rules) for path, rules in self.banned.items()})
        )

    @property
    def is_empty(self) -> bool:
        return not self.required and not self.banned


@dataclass(frozen=True)
class ModuleRecord:
    """A resolved module as reported by the inventory collaborator."""

    path: str
    version: str = ""
    # Newest known upstream version; None when the module is already at it
    update: str | None = None

    @property
    def update_available(self) -> bool:
        return self.update is not None


@dataclass(frozen=True)
class Finding:
    """One evaluated (module, rule) pair."""

    kind: RuleKind
    module_path: str
    module_version: str
    rule: str
    verdict: Verdict
    latest_version: str | None = None

    @property
    def is_violation(self) -> bool:
        return self.verdict == Verdict.VIOLATED

    def to_dict(self) -> dict[str, Any]:
        """Convert finding to dictionary."""
        return {
            "kind": self.kind.value,
            "module": self.module_path,
            "version": self.module_version,
            "rule": self.rule,
            "verdict": self.verdict.value,
            "latest_version": self.latest_version,
        }


@dataclass(frozen=True)
class ViolationFlags:
    """Sticky required/banned violation flags.

    The exit code encodes them as bits: required = 1, banned = 2.
    """

    required: bool = False
    banned: bool = False

    def merge(self, other: "ViolationFlags") -> "ViolationFlags":
        """Return flags with each bit set if it is set in either operand."""
        return ViolationFlags(required=self.required or other.required, banned=self.banned or other.banned)

    @property
    def exit_code(self) -> int:
        code = ModReqConstants.EXIT_OK
        if self.required:
            code += ModReqConstants.EXIT_REQUIRED_VIOLATION
        if self.banned:
            code += ModReqConstants.EXIT_BANNED_VIOLATION
        return code

    @property
    def compliant(self) -> bool:
        return not self.required and not self.banned


@dataclass(frozen=True)
class SourceEvaluation:
    """Findings and flags produced by checking one requirements source."""

    location: str
    findings: tuple[Finding, ...] = ()
    flags: ViolationFlags = field(default_factory=ViolationFlags)

    def get_findings_by_kind(self, kind: RuleKind) -> list[Finding]:
        """Get findings for required or banned rules."""
        return [f for f in self.findings if f.kind == kind]

    @property
    def violations(self) -> list[Finding]:
        return [f for f in self.findings if f.is_violation]

    def to_dict(self) -> dict[str, Any]:
        """Convert source evaluation to dictionary."""
        return {
            "location": self.location,
            "compliant": self.flags.compliant,
            "required_violated": self.flags.required,
            "banned_violated": self.flags.banned,
            "findings": [f.to_dict() for f in self.findings],
        }


@dataclass
class RunResult:
    """Outcome of checking every requirements source against one inventory."""

    flags: ViolationFlags = field(default_factory=ViolationFlags)
    evaluations: list[SourceEvaluation] = field(default_factory=list)
    module_count: int = 0
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def exit_code(self) -> int:
        return self.flags.exit_code

    @property
    def compliant(self) -> bool:
        return self.flags.compliant

    @property
    def total_findings(self) -> int:
        return sum(len(e.findings) for e in self.evaluations)

    @property
    def total_violations(self) -> int:
        return sum(len(e.violations) for e in self.evaluations)

    def to_dict(self) -> dict[str, Any]:
        """Convert run result to dictionary."""
        return {
            "summary": {
                "exit_code": self.exit_code,
                "compliant": self.compliant,
                "required_violated": self.flags.required,
                "banned_violated": self.flags.banned,
                "sources_checked": len(self.evaluations),
                "modules_resolved": self.module_count,
                "total_findings": self.total_findings,
                "total_violations": self.total_violations,
                "timestamp": self.timestamp.isoformat(),
            },
            "sources": [e.to_dict() for e in self.evaluations],
        }
