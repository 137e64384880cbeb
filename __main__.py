"""CLI entry point for prism.

This module acts as the central entry point for the project's CLI tools.
Each command resolves a structure file under the project's versioned
directory, runs the matching pipeline and prints either console text or
a JSON document (--json).
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from src.config import EnvVar, get_environment, get_log_level, get_project_dir
from src.core.log import get_logger, setup_logging
from src.layout import LayoutError
from src.model import StructureParseError, load_structure
from src.output import (
    format_audit,
    format_batch_summary,
    format_render,
    format_structure,
    format_suggestions,
    format_validation,
    format_version_list,
)
from src.project import (
    ProjectError,
    find_default_structure,
    list_structure_files,
    list_versions,
    resolve_version,
    structure_dir,
)
from src.render import (
    RenderError,
    RenderOptions,
    compose_side_by_side,
    default_output_name,
    render_structure,
)
from src.report import (
    RULES,
    build_audit_report,
    build_error,
    build_validate_report,
    build_validation_failure,
    run_rules,
)
from src.schema import SchemaValidationError, load_and_validate_structure
from src.suggest import SuggestionCategory, generate_suggestions

# Load environment variables from .env file
load_dotenv()

logger = get_logger("cli")

# Failures reported as {"status": "error"} rather than raised
COMMAND_ERRORS = (
    ProjectError,
    StructureParseError,
    SchemaValidationError,
    LayoutError,
    RenderError,
    OSError,
)

COMPARE_WIDTH = 1200
COMPARE_HEIGHT = 800
COMPARE_GAP = 20


# =============================================================================
# Shared Helpers
# =============================================================================


def _add_common_arguments(parser: argparse.ArgumentParser, positional_project: bool = True) -> None:
    """Register the flags every command accepts."""
    if positional_project:
        parser.add_argument(
            "path",
            nargs="?",
            default=None,
            help="Project directory (default: --project or PRISM_PROJECT_DIR)",
        )
    parser.add_argument(
        "--project",
        "-p",
        type=str,
        default=None,
        help="Project directory path",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output in JSON format",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress non-essential output",
    )


def _project_path(args: argparse.Namespace) -> Path:
    return get_project_dir(getattr(args, "path", None) or args.project)


def _emit_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _fail(args: argparse.Namespace, error: Exception | str, file: str = "") -> int:
    """Report a command error and return the failure exit code."""
    if args.json:
        _emit_json(build_error(str(error), file))
    else:
        logger.error(str(error))
    return 1


# =============================================================================
# Render Command
# =============================================================================


def _render_options(args: argparse.Namespace) -> RenderOptions:
    return RenderOptions.for_viewport(
        args.viewport,
        args.width,
        height=args.height,
        scale=args.scale,
        annotations=args.annotations,
        grid=args.grid,
    )


def _output_path(name: str) -> Path:
    output_dir = get_environment(EnvVar.PRISM_OUTPUT_DIR)
    return Path(output_dir) / name if output_dir else Path(name)


def cmd_render(args: argparse.Namespace) -> int:
    """Handle the render command."""
    if args.all:
        return cmd_render_all(args)

    project = _project_path(args)
    file = ""
    try:
        path = resolve_version(project, args.version)
        file = str(path)
        structure = load_and_validate_structure(path)
        options = _render_options(args)
        result = render_structure(structure, options)
        output = Path(args.output) if args.output else _output_path(default_output_name(project, structure.version))
        result.save(output)
    except (*COMMAND_ERRORS, ValueError) as e:
        return _fail(args, e, file)

    if args.json:
        _emit_json(
            {
                "status": "success",
                "file": file,
                "output": str(output),
                "version": structure.version,
                "width": result.width,
                "height": result.height,
            }
        )
    else:
        print(format_render(file, str(output), result.width, result.height, options.viewport))
    return 0


def cmd_render_all(args: argparse.Namespace) -> int:
    """Render every JSON file in the structure directory."""
    project = _project_path(args)
    try:
        files = list_structure_files(project)
        options = _render_options(args)
    except (ProjectError, ValueError) as e:
        return _fail(args, e)
    if not files:
        return _fail(args, f"No JSON files found in {structure_dir(project)}")

    results: list[dict[str, Any]] = []
    succeeded = 0
    for path in files:
        name = path.stem
        try:
            structure = load_and_validate_structure(path)
            result = render_structure(structure, options)
            output = _output_path(default_output_name(project, name))
            result.save(output)
        except COMMAND_ERRORS as e:
            results.append({"version": name, "status": "error", "error": str(e)})
            if not args.json:
                print(f"❌ Failed to render {name}: {e}")
            continue

        succeeded += 1
        results.append(
            {
                "version": name,
                "status": "success",
                "file": str(path),
                "output": str(output),
                "width": result.width,
                "height": result.height,
            }
        )
        if not args.json:
            print(format_render(name, str(output), result.width, result.height))

    failed = len(files) - succeeded
    if args.json:
        _emit_json(
            {
                "status": "batch_complete",
                "command": "render",
                "project": project.resolve().name,
                "total": len(files),
                "success": succeeded,
                "failed": failed,
                "viewport": options.viewport,
                "render_width": options.width,
                "render_height": options.height,
                "results": results,
            }
        )
    else:
        print(format_batch_summary(len(files), succeeded, failed))

    if succeeded == 0:
        logger.error("All batch renders failed")
        return 1
    return 0


def handle_render_command(argv: list[str]) -> int:
    """Handle render command argument parsing."""
    parser = argparse.ArgumentParser(
        prog="python . render",
        description="Render a Phase 1 structure as a black-and-white PNG wireframe",
    )
    _add_common_arguments(parser)
    parser.add_argument(
        "--version",
        "-v",
        type=str,
        default="latest",
        help="Version to render: v1, v2, approved, latest (default: latest)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Output file path (default: {project}-phase1-{version}.png)",
    )
    parser.add_argument(
        "--width",
        "-w",
        type=int,
        default=get_environment(EnvVar.PRISM_RENDER_WIDTH),
        help="Canvas width in pixels (default: 1200)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=0,
        help="Canvas height in pixels, 0 for auto (default: 0)",
    )
    parser.add_argument(
        "--scale",
        "-s",
        type=int,
        default=get_environment(EnvVar.PRISM_RENDER_SCALE),
        help="Scale factor for high-DPI displays, 1 to 3 (default: 1)",
    )
    parser.add_argument(
        "--viewport",
        type=str,
        choices=["mobile", "tablet", "desktop"],
        default=get_environment(EnvVar.PRISM_VIEWPORT),
        help="Target viewport (default: desktop)",
    )
    parser.add_argument(
        "--annotations",
        "-a",
        action="store_true",
        default=get_environment(EnvVar.PRISM_ANNOTATIONS),
        help="Draw component IDs on the mockup",
    )
    parser.add_argument(
        "--grid",
        "-g",
        action="store_true",
        help="Show an 8pt grid overlay",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Render every version in the structure directory",
    )

    args = parser.parse_args(argv)
    return cmd_render(args)


# =============================================================================
# Validate Command
# =============================================================================


def _check_phase(args: argparse.Namespace) -> str | None:
    if args.phase != 1:
        return f"Phase {args.phase} validation not yet implemented"
    return None


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle the validate command: schema check plus the requested rules."""
    phase_error = _check_phase(args)
    if phase_error:
        return _fail(args, phase_error)

    project = _project_path(args)
    try:
        path = find_default_structure(project)
    except ProjectError as e:
        return _fail(args, e)
    file = str(path)

    try:
        structure = load_and_validate_structure(path)
    except (StructureParseError, SchemaValidationError) as e:
        if args.json:
            _emit_json(build_validation_failure(file, e))
        else:
            print(f"❌ Validation failed for {file}")
            logger.error(str(e))
        return 1
    except OSError as e:
        return _fail(args, e, file)

    names = list(RULES) if args.all_rules else [n for n in RULES if getattr(args, n)]
    results = run_rules(structure, names)
    if args.json:
        _emit_json(build_validate_report(structure, results, file))
    else:
        print(format_validation(structure, results, file))
    return 0


def handle_validate_command(argv: list[str]) -> int:
    """Handle validate command argument parsing."""
    parser = argparse.ArgumentParser(
        prog="python . validate",
        description="Validate a structure against the Phase 1 schema and UX rules",
    )
    _add_common_arguments(parser)
    parser.add_argument(
        "--phase",
        type=int,
        default=1,
        help="Phase to validate against (default: 1)",
    )
    rules = parser.add_argument_group("rules")
    for name in RULES:
        rules.add_argument(
            f"--{name.replace('_', '-')}",
            dest=name,
            action="store_true",
            help=f"Run {name.replace('_', ' ')} validation",
        )
    rules.add_argument(
        "--all-rules",
        action="store_true",
        help="Run every rule",
    )

    args = parser.parse_args(argv)
    return cmd_validate(args)


# =============================================================================
# Audit Command
# =============================================================================


def cmd_audit(args: argparse.Namespace) -> int:
    """Handle the audit command. Findings never change the exit code."""
    phase_error = _check_phase(args)
    if phase_error:
        return _fail(args, phase_error)

    project = _project_path(args)
    file = ""
    try:
        path = find_default_structure(project)
        file = str(path)
        structure = load_structure(path)
    except COMMAND_ERRORS as e:
        return _fail(args, e, file)

    results = run_rules(structure)
    if args.json:
        _emit_json(build_audit_report(structure, results, file))
    else:
        print(format_audit(structure, results, file))
    return 0


def handle_audit_command(argv: list[str]) -> int:
    """Handle audit command argument parsing."""
    parser = argparse.ArgumentParser(
        prog="python . audit",
        description="Run every design rule and summarise the results",
    )
    _add_common_arguments(parser)
    parser.add_argument(
        "--phase",
        type=int,
        default=1,
        help="Phase to audit (default: 1)",
    )
    args = parser.parse_args(argv)
    return cmd_audit(args)


# =============================================================================
# Suggest Command
# =============================================================================


def cmd_suggest(args: argparse.Namespace) -> int:
    """Handle the suggest command."""
    category = SuggestionCategory.ALL.value if args.all or not args.category else args.category
    project = _project_path(args)
    file = ""
    try:
        path = find_default_structure(project)
        file = str(path)
        structure = load_structure(path)
    except COMMAND_ERRORS as e:
        return _fail(args, e, file)

    result = generate_suggestions(structure, category)
    if args.json:
        _emit_json(
            {
                "file": file,
                "version": structure.version,
                "phase": structure.phase,
                "suggestions": result.to_dict(),
            }
        )
    else:
        print(format_suggestions(structure, result, file))
    return 0


def handle_suggest_command(argv: list[str]) -> int:
    """Handle suggest command argument parsing."""
    parser = argparse.ArgumentParser(
        prog="python . suggest",
        description="Suggest design best practices for the approved or latest structure",
    )
    _add_common_arguments(parser)
    parser.add_argument(
        "--category",
        "-c",
        type=str,
        choices=[c.value for c in SuggestionCategory],
        default=None,
        help="Specific category (default: all)",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Show suggestions for all categories",
    )

    args = parser.parse_args(argv)
    return cmd_suggest(args)


# =============================================================================
# List / Show Commands
# =============================================================================


def cmd_list(args: argparse.Namespace) -> int:
    """Handle the list command."""
    project = _project_path(args)
    directory = structure_dir(project)
    try:
        versions = list_versions(project)
    except ProjectError as e:
        if args.json:
            _emit_json({"status": "error", "error": str(e), "path": str(directory), "versions": []})
        else:
            logger.error(str(e))
        return 1

    if args.json:
        _emit_json(
            {
                "status": "success",
                "project": str(project),
                "path": str(directory),
                "count": len(versions),
                "versions": [v.to_dict() for v in versions],
            }
        )
    else:
        print(format_version_list(versions, str(project)))
    return 0


def handle_list_command(argv: list[str]) -> int:
    """Handle list command argument parsing."""
    parser = argparse.ArgumentParser(
        prog="python . list",
        description="List structure versions in a project",
    )
    _add_common_arguments(parser)

    args = parser.parse_args(argv)
    return cmd_list(args)


def cmd_show(args: argparse.Namespace) -> int:
    """Handle the show command."""
    project = _project_path(args)
    file = ""
    try:
        path = resolve_version(project, args.version)
        file = str(path)
        structure = load_structure(path)
    except COMMAND_ERRORS as e:
        return _fail(args, e, file)

    if args.json:
        _emit_json(
            {
                "status": "success",
                "file": path.name,
                "path": file,
                "structure": structure.model_dump(mode="json"),
            }
        )
    else:
        print(format_structure(structure, path.name))
    return 0


def handle_show_command(argv: list[str]) -> int:
    """Handle show command argument parsing."""
    parser = argparse.ArgumentParser(
        prog="python . show",
        description="Show the details of one structure version",
    )
    parser.add_argument(
        "version",
        type=str,
        help="Version to show: v1, v2, approved, latest",
    )
    _add_common_arguments(parser, positional_project=False)

    args = parser.parse_args(argv)
    return cmd_show(args)


# =============================================================================
# Compare Command
# =============================================================================


def cmd_compare(args: argparse.Namespace) -> int:
    """Handle the compare command: render two versions side by side."""
    project = _project_path(args).resolve()
    try:
        from_path = resolve_version(project, args.from_version)
        to_path = resolve_version(project, args.to_version)
        before = load_structure(from_path)
        after = load_structure(to_path)

        options = RenderOptions(width=COMPARE_WIDTH, height=COMPARE_HEIGHT, viewport="desktop")
        left = render_structure(before, options)
        right = render_structure(after, options)
        canvas = compose_side_by_side(left.image, right.image, gap=COMPARE_GAP)

        output = Path(args.output) if args.output else _output_path(
            f"{project.name}-compare-{args.from_version}-{args.to_version}.png"
        )
        try:
            canvas.save(output, format="PNG")
        except OSError as e:
            raise RenderError(f"failed to save PNG: {e}") from e
    except COMMAND_ERRORS as e:
        return _fail(args, e)

    if args.json:
        _emit_json(
            {
                "status": "success",
                "command": "compare",
                "project": {"name": project.name, "path": str(project)},
                "from": {
                    "version": args.from_version,
                    "file": str(from_path),
                    "width": left.width,
                    "height": left.height,
                },
                "to": {
                    "version": args.to_version,
                    "file": str(to_path),
                    "width": right.width,
                    "height": right.height,
                },
                "output": {
                    "file": str(output),
                    "format": "png",
                    "dimensions": {"width": canvas.width, "height": canvas.height},
                },
                "summary": {
                    "viewport": "desktop",
                    "gap_pixels": COMPARE_GAP,
                    "layout": "side-by-side",
                    "from_purpose": before.intent.purpose,
                    "to_purpose": after.intent.purpose,
                    "from_locked": before.locked,
                    "to_locked": after.locked,
                    "same_phase": before.phase == after.phase,
                },
            }
        )
        return 0

    print(f"✅ Compared {args.from_version} vs {args.to_version}")
    print(f"   From: {args.from_version} ({left.width}x{left.height})")
    print(f"   To: {args.to_version} ({right.width}x{right.height})")
    print(f"   Output: {output} ({canvas.width}x{canvas.height})")
    print(f"   Layout: Side-by-side with {COMPARE_GAP}px gap")
    if after.change_summary:
        print(f"   Changes: {after.change_summary}")
    return 0


def handle_compare_command(argv: list[str]) -> int:
    """Handle compare command argument parsing."""
    parser = argparse.ArgumentParser(
        prog="python . compare",
        description="Render two versions side by side in one PNG",
    )
    _add_common_arguments(parser)
    parser.add_argument(
        "--from",
        dest="from_version",
        type=str,
        default="v1",
        help="Source version (default: v1)",
    )
    parser.add_argument(
        "--to",
        dest="to_version",
        type=str,
        default="v2",
        help="Target version (default: v2)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Output file path (default: {project}-compare-{from}-{to}.png)",
    )

    args = parser.parse_args(argv)
    return cmd_compare(args)


# =============================================================================
# Main
# =============================================================================


def show_help() -> None:
    """Display CLI help message."""
    print("Usage: python . {command} [args]")
    print("\n=== Rendering ===")
    print("  render     Render a structure as a PNG wireframe")
    print("  compare    Render two versions side by side")
    print("\n=== Review ===")
    print("  validate   Schema validation plus selected design rules")
    print("  audit      Run all 13 design rules and summarise")
    print("  suggest    Best-practice suggestions by category")
    print("\n=== Versions ===")
    print("  list       List structure versions")
    print("  show       Show one structure version")
    print("\nGlobal flags: --json, --project/-p DIR, --quiet/-q")
    print("\nExamples:")
    print("  python . render ./my-dashboard --version v2 --viewport mobile")
    print("  python . render ./my-dashboard --all")
    print("  python . validate ./my-dashboard --hierarchy --touch-targets")
    print("  python . validate ./my-dashboard --all-rules --json")
    print("  python . audit ./my-dashboard")
    print("  python . suggest ./my-dashboard --category forms")
    print("  python . list -p ./my-dashboard")
    print("  python . show v2 -p ./my-dashboard")
    print("  python . compare ./my-dashboard --from v1 --to v2")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        show_help()
        return 1

    command = argv[0]
    rest_args = argv[1:]

    if command in ("-h", "--help"):
        show_help()
        return 0

    commands = {
        "render": lambda: handle_render_command(rest_args),
        "validate": lambda: handle_validate_command(rest_args),
        "audit": lambda: handle_audit_command(rest_args),
        "suggest": lambda: handle_suggest_command(rest_args),
        "list": lambda: handle_list_command(rest_args),
        "show": lambda: handle_show_command(rest_args),
        "compare": lambda: handle_compare_command(rest_args),
    }

    if command in commands:
        level = get_log_level()
        if "-q" in rest_args or "--quiet" in rest_args:
            level = max(level, logging.WARNING)
        setup_logging(level)
        return commands[command]()

    logger.error(f"Unknown command: {command}")
    show_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
