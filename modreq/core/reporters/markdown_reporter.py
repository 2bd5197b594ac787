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
Markdown format reporter for check runs.
"""

from ..models import Finding, RuleKind, RunResult, SourceEvaluation


def _escape_cell(text: str) -> str:
    return text.replace("|", "\\|")


class MarkdownReporter:
    """Generates Markdown format reports."""

    def __init__(self, detailed: bool = True):
        """
        Initialize Markdown reporter.

        Args:
            detailed: If True, list met rules as well as violations
        """
        self.detailed = detailed

    def generate_report(self, data: RunResult) -> str:
        """
        Generate Markdown report.

        Args:
            data: RunResult from a completed run

        Returns:
            Markdown string
        """
        lines = []

        # Header
        lines.append("# Module Requirements Report")
        lines.append("")
        lines.append(f"**Status:** {'[OK] ALL REQUIREMENTS MET' if data.compliant else '[FAIL] REQUIREMENTS NOT MET'}")
        lines.append(f"**Exit Code:** {data.exit_code}")
        lines.append(f"**Modules Resolved:** {data.module_count}")
        lines.append(f"**Timestamp:** {data.timestamp.isoformat()}")
        lines.append("")

        # Summary
        lines.append("## Summary")
        lines.append("")
        lines.append(f"- **Sources Checked:** {len(data.evaluations)}")
        lines.append(f"- **Rules Evaluated:** {data.total_findings}")
        lines.append(f"- **Violations:** {data.total_violations}")
        lines.append(f"- **Required Violated:** {'yes' if data.flags.required else 'no'}")
        lines.append(f"- **Banned Violated:** {'yes' if data.flags.banned else 'no'}")
        lines.append("")

        for evaluation in data.evaluations:
            lines.extend(self._generate_source_section(evaluation))

        return "\n".join(lines)

    def _generate_source_section(self, evaluation: SourceEvaluation) -> list[str]:
        lines = [f"## {evaluation.location}", ""]

        findings = list(evaluation.findings) if self.detailed else evaluation.violations
        if not findings:
            lines.append("No matching rules." if self.detailed else "No violations.")
            lines.append("")
            return lines

        lines.append("| Rule | Module | Version | Pattern | Result |")
        lines.append("|------|--------|---------|---------|--------|")
        for finding in findings:
            lines.append(self._format_row(finding))
        lines.append("")
        return lines

    @staticmethod
    def _format_row(finding: Finding) -> str:
        kind = "required" if finding.kind == RuleKind.REQUIRED else "banned"
        version = finding.module_version or "-"
        if finding.latest_version:
            version = f"{version} (latest {finding.latest_version})"
        result = "[FAIL]" if finding.is_violation else "[OK]"
        return (
            f"| {kind} | `{_escape_cell(finding.module_path)}` | {_escape_cell(version)} "
            f"| `{_escape_cell(finding.rule)}` | {result} |"
        )
