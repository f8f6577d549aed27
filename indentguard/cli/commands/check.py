"""
Indentation check command handler.
"""

import sys

from indentguard.api import CheckResult, IndentGuard
from indentguard.cli.formatters import format_check_result
from indentguard.cli.rich_output import RichOutputManager, get_rich_output

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_PROBLEMS = 2


def render_check_result(result: CheckResult, rich_output: RichOutputManager, show_lines: bool) -> None:
    """Render a check result on the terminal."""
    rich_output.print_header(
        "Indentation Check",
        f"{len(result.files)} files checked, {result.total_problems} problems",
    )

    for file_result in result.files:
        report = file_result.report
        if not report.problems and not show_lines:
            continue

        table = rich_output.create_table(
            f"{file_result.file_path} (unit {report.indent_unit})",
            ["Line", "Problem", "Detected", "Expected"],
        )
        for problem in report.problems:
            rich_output.add_table_row(
                table,
                problem.line_index + 1,
                problem.label,
                problem.detected_width,
                problem.expected_width,
            )
        rich_output.print_table(table)

        if show_lines:
            for assessment in report.violating_lines:
                rich_output.print_info(
                    f"line {assessment.line_index + 1}: {assessment.status.value} "
                    f"(detected {assessment.detected_width}, expected {assessment.expected_width})"
                )

    for error in result.errors:
        rich_output.print_error(f"{error.file_path}: {error.message}")

    for warning in result.warnings:
        rich_output.print_warning(warning)

    if result.total_problems == 0 and not result.errors:
        rich_output.print_success("No indentation problems found")


def cmd_check(args, guard: IndentGuard) -> int:
    """Handle check command."""
    result = guard.check_path(args.path)

    format_type = args.format or guard.config.report_settings.output_format
    show_lines = bool(args.show_lines or guard.config.report_settings.show_lines)

    if args.output:
        output = format_check_result(result, format_type, show_lines)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
        print(f"Check results written to {args.output}", file=sys.stderr)
    elif format_type == "text":
        render_check_result(result, get_rich_output(), show_lines)
    else:
        print(format_check_result(result, format_type, show_lines))

    if result.errors and not result.files:
        return EXIT_ERROR
    if args.fail_on_problems and result.total_problems:
        return EXIT_PROBLEMS
    return EXIT_OK
