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

"""Command-line interface for modreq."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from ..config.config import Config
from ..config.constants import ModReqConstants
from ..core.exceptions import InventoryError, ModReqError
from ..core.inventory import GoModuleResolver, load_inventory
from ..core.models import Finding, ModuleRecord, RuleKind, RunResult, SourceEvaluation
from ..core.reporters.json_reporter import JSONReporter
from ..core.reporters.markdown_reporter import MarkdownReporter
from ..core.runner import run_checks
from ..core.transports.resolver import SourceResolver, normalize_location

logger = logging.getLogger("modreq.cli")


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _build_config(args: argparse.Namespace) -> Config:
    """Build run configuration from CLI *args*, falling back to the environment."""
    kwargs = {
        "ssh_identity_file": Path(args.ssh_identity_file) if args.ssh_identity_file else None,
        "workdir": Path(args.workdir) if args.workdir else None,
        "inventory_file": args.inventory,
        "ssh_host_key_policy": args.ssh_host_key_policy,
        "go_binary": args.go_binary,
        "output_format": args.format,
        "verbose": args.verbose,
    }
    return Config(**kwargs)


def _resolve_locations(args: argparse.Namespace, config: Config) -> list[str]:
    if not args.locations:
        return [ModReqConstants.default_requirements_location(config.workdir)]
    return [normalize_location(loc) for loc in args.locations]


def _resolve_inventory(config: Config) -> list[ModuleRecord]:
    if config.inventory_file:
        return load_inventory(config.inventory_file)
    return GoModuleResolver(go_binary=config.go_binary, workdir=config.workdir).resolve()


def _write_output(args: argparse.Namespace, output: str) -> None:
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
            f.write("\n")
        print(f"Report saved to: {args.output}", file=sys.stderr)
    else:
        print(output)


# ---------------------------------------------------------------------------
# Summary formatters
# ---------------------------------------------------------------------------


def _format_finding(finding: Finding, verbose: bool) -> str:
    label = "required:" if finding.kind == RuleKind.REQUIRED else "banned:  "
    tag = "[FAIL]" if finding.is_violation else "[OK]"
    line = f"{label} {finding.module_path} {tag}"
    if verbose:
        version = finding.module_version or "-"
        if finding.latest_version:
            version = f"{version}, latest {finding.latest_version}"
        line += f" (version {version}) [rule is {finding.rule}]"
    return line


def _format_source_summary(evaluation: SourceEvaluation, verbose: bool) -> str:
    lines = [f"checking requirements: {evaluation.location}"]
    lines.extend(_format_finding(f, verbose) for f in evaluation.findings)
    return "\n".join(lines)


def _format_run_summary(result: RunResult) -> str:
    lines = [f"all:      {'[OK]' if result.compliant else '[FAIL]'}"]
    if result.compliant:
        lines.append("All module requirements met")
    return "\n".join(lines)


def _format_report(fmt: str, result: RunResult, verbose: bool) -> str:
    if fmt == "json":
        return JSONReporter(pretty=True).generate_report(result)
    if fmt == "markdown":
        return MarkdownReporter(detailed=verbose).generate_report(result)
    return _format_run_summary(result)


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------


def check_command(args: argparse.Namespace) -> int:
    """Check every requirements source against the resolved modules."""
    try:
        config = _build_config(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return ModReqConstants.EXIT_FATAL

    locations = _resolve_locations(args, config)

    try:
        inventory = _resolve_inventory(config)
    except InventoryError as e:
        print(f"Error getting modules: {e}", file=sys.stderr)
        return ModReqConstants.EXIT_FATAL

    summary = config.output_format == "summary"

    def _print_source(evaluation: SourceEvaluation) -> None:
        print(_format_source_summary(evaluation, config.verbose))

    # Summary output streams per source; other formats render once at the end
    on_source: Callable[[SourceEvaluation], None] | None = None
    if summary and not args.output:
        on_source = _print_source

    try:
        result = run_checks(locations, inventory, resolver=SourceResolver(config), on_source=on_source)
    except ModReqError as e:
        print(f"Error: {e}", file=sys.stderr)
        return ModReqConstants.EXIT_FATAL

    output = _format_report(config.output_format, result, config.verbose)
    if summary and args.output:
        sections = [_format_source_summary(e, config.verbose) for e in result.evaluations]
        output = "\n".join([*sections, output])

    try:
        _write_output(args, output)
    except OSError as e:
        print(f"Error: unable to write report to {args.output}: {e}", file=sys.stderr)
        return ModReqConstants.EXIT_FATAL

    return result.exit_code


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="modreq",
        description="modreq - check resolved module versions against required and banned rules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Requirement locations may be file://, http://, https:// or ssh:// URIs, or
plain filesystem paths. Default: file://<cwd>/{ModReqConstants.DEFAULT_REQUIREMENTS_FILE}

Exit codes:
  0  all requirements met
  1  a required rule is not met
  2  a banned rule matched
  3  both
  -1 fatal error (unreadable source, malformed file, invalid rule)

Examples:
  modreq
  modreq file:///srv/policy/.gomodreq.yml https://example.com/org.gomodreq.yml
  modreq ssh://deploy@config.example.com/etc/modreq/base.yml
  go list -m -u -json all | modreq --inventory - ./.gomodreq.yml
        """,
    )
    parser.add_argument("locations", nargs="*", metavar="LOCATION", help="Requirements source URI or path")
    parser.add_argument("--version", action="store_true", help="Print version and exit")
    parser.add_argument(
        "--inventory",
        metavar="PATH",
        help="Read saved 'go list -m -u -json all' output instead of running go ('-' for stdin)",
    )
    parser.add_argument("--go-binary", metavar="PATH", help="go executable (or set MODREQ_GO_BINARY)")
    parser.add_argument("--workdir", metavar="DIR", help="Project directory to resolve modules in")
    parser.add_argument(
        "--ssh-identity-file",
        metavar="PATH",
        help="Private key for ssh sources (default: ~/.ssh/id_rsa, or set MODREQ_SSH_IDENTITY_FILE)",
    )
    parser.add_argument(
        "--ssh-host-key-policy",
        choices=ModReqConstants.HOST_KEY_POLICIES,
        help="Host key verification for ssh sources (default: accept-any)",
    )
    parser.add_argument(
        "--format",
        choices=ModReqConstants.OUTPUT_FORMATS,
        help="Output format (default: summary)",
    )
    parser.add_argument("--output", "-o", help="Output file path")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show versions and rules; debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"modreq {ModReqConstants.VERSION}")
        return ModReqConstants.EXIT_OK

    _configure_logging(args.verbose)
    return check_command(args)


if __name__ == "__main__":
    sys.exit(main())
