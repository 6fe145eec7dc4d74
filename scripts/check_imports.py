#!/usr/bin/env python3
"""Check hexagonal architecture boundaries of the booth.

This script enforces the layering rules:
- domain/: Pure booth logic, NO imports from other src layers
- config/: Settings and demo roster, may import from domain/ only
- application/: Use cases, may import from domain/ only
- infrastructure/: Adapters, may import from domain/ and application/
- api/: External interface, may import from application/ and domain/

bootstrap/ is the composition root and may import anything.

It also enforces the clock rule: no direct ``datetime.now()`` or
``datetime.utcnow()`` outside the system time authority adapter. Every
other timestamp must come from an injected TimeAuthorityProtocol.

Usage:
    python scripts/check_imports.py [src_directory]

Exit codes:
    0: No violations found
    1: Violations found
"""
import ast
import re
import sys
from pathlib import Path

# Layer hierarchy: lower number = more inner layer (more protected)
LAYER_HIERARCHY: dict[str, int] = {
    "domain": 0,  # Core, innermost - imports NOTHING from src
    "config": 1,  # Settings - imports from domain only
    "application": 1,  # Use cases - imports from domain only
    "infrastructure": 2,  # Adapters - imports from domain, application
    "api": 3,  # External interface - imports from application, domain
}

# Explicit import rules: what each layer CAN import from
ALLOWED_IMPORTS: dict[str, set[str]] = {
    "domain": set(),
    "config": {"domain"},
    "application": {"domain"},
    "infrastructure": {"domain", "application"},
    "api": {"application", "domain"},
}

# Matches: datetime.now(), datetime.utcnow()
DATETIME_NOW_PATTERN = re.compile(r"datetime\s*\.\s*(now|utcnow)\s*\(")

# Relative to src/; the only file allowed to read the wall clock directly
CLOCK_ALLOWED_FILES: frozenset[str] = frozenset(
    {"infrastructure/adapters/system_time_authority.py"}
)

Violation = tuple[str, int, str]


def get_import_module(node: ast.Import | ast.ImportFrom) -> str | None:
    """Extract the module name from an import statement."""
    if isinstance(node, ast.ImportFrom):
        return node.module
    if isinstance(node, ast.Import) and node.names:
        # For 'import x.y.z', get the first name
        return node.names[0].name
    return None


def _get_file_layer(py_file: Path, src_dir: Path) -> str | None:
    try:
        relative = py_file.relative_to(src_dir)
    except ValueError:
        return None

    parts = relative.parts
    if not parts:
        return None
    return parts[0] if parts[0] in LAYER_HIERARCHY else None


def _read_source(py_file: Path) -> str | None:
    try:
        return py_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Warning: Could not read {py_file}: {e}", file=sys.stderr)
        return None


def _check_import_violation(
    module: str, file_layer: str, allowed_layers: set[str]
) -> str | None:
    """Return an error message if importing ``module`` crosses a boundary.

    Args:
        module: The import module string (e.g., "src.domain.models")
        file_layer: The layer the importing file belongs to
        allowed_layers: Set of layers this file is allowed to import from
    """
    if not module.startswith("src."):
        return None

    target_layer = module.split(".")[1]
    if target_layer not in LAYER_HIERARCHY or target_layer == file_layer:
        return None

    if target_layer not in allowed_layers:
        return f"{file_layer} layer cannot import from {target_layer}"
    return None


def check_file_imports(py_file: Path, src_dir: Path) -> list[Violation]:
    """Check a single file for import boundary violations.

    Returns:
        List of (file_path, line_number, violation_message) tuples
    """
    file_layer = _get_file_layer(py_file, src_dir)
    if file_layer is None:
        return []

    source = _read_source(py_file)
    if source is None:
        return []
    try:
        tree = ast.parse(source, filename=str(py_file))
    except SyntaxError as e:
        print(f"Warning: Could not parse {py_file}: {e}", file=sys.stderr)
        return []

    violations: list[Violation] = []
    allowed_layers = ALLOWED_IMPORTS.get(file_layer, set())

    for node in ast.walk(tree):
        if isinstance(node, (ast.Import, ast.ImportFrom)):
            module = get_import_module(node)
            if module:
                error_msg = _check_import_violation(module, file_layer, allowed_layers)
                if error_msg:
                    violations.append((str(py_file), node.lineno, error_msg))

    return violations


def check_file_clock_usage(py_file: Path, src_dir: Path) -> list[Violation]:
    """Flag direct wall-clock reads outside the time authority adapter."""
    try:
        relative = py_file.relative_to(src_dir).as_posix()
    except ValueError:
        return []
    if relative in CLOCK_ALLOWED_FILES:
        return []

    source = _read_source(py_file)
    if source is None:
        return []

    violations: list[Violation] = []
    for line_no, line in enumerate(source.splitlines(), start=1):
        if line.lstrip().startswith("#"):
            continue
        if DATETIME_NOW_PATTERN.search(line):
            violations.append(
                (
                    str(py_file),
                    line_no,
                    "direct datetime.now() call; inject TimeAuthorityProtocol",
                )
            )
    return violations


def check_import_boundaries(src_dir: Path) -> list[Violation]:
    """Check every Python file under ``src_dir`` for boundary violations."""
    violations: list[Violation] = []

    if not src_dir.exists():
        print(f"Error: Source directory '{src_dir}' does not exist", file=sys.stderr)
        return violations

    for py_file in src_dir.rglob("*.py"):
        violations.extend(check_file_imports(py_file, src_dir))
        violations.extend(check_file_clock_usage(py_file, src_dir))

    return violations


def format_violations(violations: list[Violation]) -> str:
    """Format violations for human-readable output."""
    if not violations:
        return ""

    lines = ["Architecture violations found:", ""]
    for file_path, line_no, message in sorted(violations):
        lines.append(f"  {file_path}:{line_no}: {message}")
    lines.append("")
    lines.append(f"Total: {len(violations)} violation(s)")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        0 if no violations, 1 if violations found
    """
    args = sys.argv[1:] if argv is None else argv
    if args:
        src_dir = Path(args[0])
    else:
        src_dir = Path(__file__).parent.parent / "src"

    violations = check_import_boundaries(src_dir)
    if violations:
        print(format_violations(violations))
        return 1

    print("No architecture violations found.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
