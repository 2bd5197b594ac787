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
Compliance evaluator.

Scores one requirements spec against one module inventory. Evaluation is pure:
the same (spec, inventory) pair always yields the same findings and flags.

``latest`` means different things in the two sections:

- required ``latest``: violated when a newer version exists upstream
- banned ``latest``: violated when the module *is* at the newest version
"""

import logging
from collections.abc import Sequence

from .models import Finding, ModuleRecord, RequirementSpec, RuleKind, SourceEvaluation, Verdict, VersionRule, ViolationFlags

logger = logging.getLogger(__name__)


def _finding(kind: RuleKind, module: ModuleRecord, rule: VersionRule, violated: bool) -> Finding:
    return Finding(
        kind=kind,
        module_path=module.path,
        module_version=module.version,
        rule=rule.pattern,
        verdict=Verdict.VIOLATED if violated else Verdict.MET,
        latest_version=module.update,
    )


def check_required(spec: RequirementSpec, inventory: Sequence[ModuleRecord]) -> list[Finding]:
    """
    Evaluate required rules. At most one finding per module.

    Raises:
        RuleCompileError: If a rule is not a valid regular expression
    """
    findings = []
    for module in inventory:
        rule = spec.required.get(module.path)
        if rule is None:
            continue
        if rule.is_latest:
            violated = module.update_available
        else:
            violated = not rule.matches(module.version)
        findings.append(_finding(RuleKind.REQUIRED, module, rule, violated))
    return findings


def check_banned(spec: RequirementSpec, inventory: Sequence[ModuleRecord]) -> list[Finding]:
    """
    Evaluate banned rules. One finding per (module, rule) pair.

    Raises:
        RuleCompileError: If a rule is not a valid regular expression
    """
    findings = []
    for module in inventory:
        for rule in spec.banned.get(module.path, ()):
            if rule.is_latest:
                violated = not module.update_available
            else:
                violated = rule.matches(module.version)
            findings.append(_finding(RuleKind.BANNED, module, rule, violated))
    return findings


def evaluate(spec: RequirementSpec, inventory: Sequence[ModuleRecord]) -> SourceEvaluation:
    """
    Evaluate every module of *inventory* against *spec*.

    Args:
        spec: Requirements to enforce
        inventory: Resolved modules

    Returns:
        SourceEvaluation with required findings first, then banned findings

    Raises:
        RuleCompileError: If any rule is not a valid regular expression
    """
    required = check_required(spec, inventory)
    banned = check_banned(spec, inventory)

    flags = ViolationFlags(
        required=any(f.is_violation for f in required),
        banned=any(f.is_violation for f in banned),
    )
    logger.debug(
        "Evaluated %s: %d required, %d banned findings (exit bits %d)",
        spec.location or "<memory>",
        len(required),
        len(banned),
        flags.exit_code,
    )
    return SourceEvaluation(location=spec.location, findings=tuple(required + banned), flags=flags)
