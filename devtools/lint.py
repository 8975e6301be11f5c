import subprocess
import sys
from pathlib import Path

from funlog import log_calls
from rich import get_console, reconfigure
from rich import print as rprint

PROJECT_ROOT = Path.cwd().resolve()
CODE_PATHS = [
    str(PROJECT_ROOT / "src"),
    str(PROJECT_ROOT / "tests"),
    str(PROJECT_ROOT / "devtools"),
    str(PROJECT_ROOT / "docs"),
]
DOC_PATHS = [str(PROJECT_ROOT / "README.md"), str(PROJECT_ROOT / "DESIGN.md")]

# No emojis on legacy windows.
reconfigure(emoji=not get_console().options.legacy_windows)

STEPS: list[tuple[str, list[str]]] = [
    ("spelling", ["codespell", "--write-changes", *CODE_PATHS, *DOC_PATHS]),
    ("ruff check", ["ruff", "check", "--fix", *CODE_PATHS]),
    ("ruff format", ["ruff", "format", *CODE_PATHS]),
    (
        "ty",
        [
            "ty",
            "check",
            "--project",
            str(PROJECT_ROOT),
            "--error",
            "unused-ignore-comment",
            str(PROJECT_ROOT / "src"),
            str(PROJECT_ROOT / "tests"),
        ],
    ),
    ("store purity", [sys.executable, str(PROJECT_ROOT / "devtools" / "semantic_lint.py")]),
]


def main() -> int:
    rprint()

    failed = [name for name, cmd in STEPS if run(cmd)]

    rprint()
    if failed:
        rprint(f"[bold red]:x: Lint failed: {', '.join(failed)}[/bold red]")
    else:
        rprint("[bold green]:white_check_mark: Lint passed![/bold green]")
    rprint()

    return len(failed)


@log_calls(level="warning", show_timing_only=True)
def run(cmd: list[str]) -> int:
    rprint()
    rprint(f"[bold green]:arrow_forward: {' '.join(cmd)}[/bold green]")

    try:
        subprocess.run(cmd, text=True, check=True)
    except subprocess.CalledProcessError as e:
        rprint(f"[bold red]Error: {e}[/bold red]")
        return 1
    except FileNotFoundError as e:
        rprint(f"[bold red]Executable not found: {e}[/bold red]")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
