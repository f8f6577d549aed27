"""
Output formatters for CLI commands.

Formats check results as text, JSON or HTML. Line numbers are shown 1-based;
the JSON payload also carries the 0-based `line_index` of every record.
"""

import html
import json
from typing import List

from indentguard.api import CheckResult, FileCheckResult


def format_check_result(result: CheckResult, format_type: str, show_lines: bool = False) -> str:
    """Format a check result for output."""
    if format_type == "json":
        return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)

    elif format_type == "html":
        return _format_check_html(result)

    else:  # text format
        return _format_check_text(result, show_lines)


def _unit_description(file_result: FileCheckResult) -> str:
    report = file_result.report
    if not report.enabled:
        return "checking disabled"
    if report.indent_unit == 0:
        return "no indentation unit found, not checked"
    source = "inferred" if report.unit_inferred else "configured"
    return f"unit {report.indent_unit}, {source}"


def _format_check_text(result: CheckResult, show_lines: bool) -> str:
    output: List[str] = []
    output.append("Indentation Check Results")
    output.append("=" * 50)
    output.append(f"Files checked: {len(result.files)}")
    output.append(f"Files with problems: {len(result.files_with_problems)}")
    output.append(f"Total problems: {result.total_problems}")
    if result.errors:
        output.append(f"Files not checked: {len(result.errors)}")
    output.append("")

    for file_result in result.files:
        report = file_result.report
        if not report.problems and not show_lines:
            continue

        output.append(f"{file_result.file_path} ({_unit_description(file_result)})")
        for problem in report.problems:
            output.append(f"  line {problem.line_index + 1}: {problem.label} - {problem.message}")

        if show_lines and report.violating_lines:
            output.append("  Violating lines:")
            for assessment in report.violating_lines:
                output.append(
                    f"    {assessment.line_index + 1:5d}: {assessment.status.value} "
                    f"(detected {assessment.detected_width}, expected {assessment.expected_width})"
                )
        output.append("")

    for error in result.errors:
        output.append(f"Error: {error.file_path}: {error.message}")

    for warning in result.warnings:
        output.append(f"Warning: {warning}")

    return "\n".join(output).rstrip() + "\n"


def _format_check_html(result: CheckResult) -> str:
    html_parts = []
    html_parts.append("<html><head><title>Indentation Check Results</title>")
    html_parts.append("<style>")
    html_parts.append("body { font-family: Arial, sans-serif; margin: 20px; }")
    html_parts.append(".file { border: 1px solid #ccc; margin: 10px 0; padding: 10px; }")
    html_parts.append(".over { border-left: 3px solid #92b9d1; padding-left: 5px; }")
    html_parts.append(".under { border-left: 3px solid #d19292; padding-left: 5px; }")
    html_parts.append(".error { color: #d32f2f; }")
    html_parts.append("</style></head><body>")

    html_parts.append("<h1>Indentation Check Results</h1>")
    html_parts.append(
        f"<p>{result.total_problems} problems in {len(result.files_with_problems)} "
        f"of {len(result.files)} files</p>"
    )

    for file_result in result.files_with_problems:
        html_parts.append('<div class="file">')
        html_parts.append(
            f"<h3>{html.escape(file_result.file_path)}</h3>"
            f"<p>{html.escape(_unit_description(file_result))}</p>"
        )
        for problem in file_result.report.problems:
            html_parts.append(
                f'<div class="{problem.direction.value}">'
                f"<strong>Line {problem.line_index + 1}: {problem.label}</strong> "
                f"{html.escape(problem.message)}</div>"
            )
        html_parts.append("</div>")

    for error in result.errors:
        html_parts.append(
            f'<p class="error">{html.escape(str(error.file_path))}: {html.escape(error.message)}</p>'
        )

    html_parts.append("</body></html>")
    return "\n".join(html_parts)
