"""
validator.py - Preflight and input validation

Checks that the external tools are available before anything is asked,
and that required answers are not empty.
"""

import subprocess

from .console import die, log
from .runner import run

GH_INSTALL_HINT = (
    "Install GitHub CLI from https://cli.github.com/. "
    "You can also use winget: `winget install --id GitHub.cli`."
)

PREREQUISITES = [
    "Ensure you have the following before running this script:",
    "1. Git is installed and configured (user.name and user.email).",
    "2. GitHub CLI (gh) is installed and authenticated.",
    "   Run `gh auth login` to authenticate if not already logged in.",
]


def show_prerequisites():
    for line in PREREQUISITES:
        log(line)


def tool_version(executable):
    """
    Return the first line of `<executable> --version`, or None when the
    tool is missing or the version command fails.
    """
    try:
        output = run([executable, "--version"], capture=True, quiet=True)
    except (FileNotFoundError, subprocess.CalledProcessError):
        return None
    lines = output.strip().splitlines()
    return lines[0] if lines else ""


def check_tools():
    """Abort with status 1 unless both git and gh respond to --version"""
    git_version = tool_version("git")
    if git_version is None:
        die("Git is not installed or not found in the system PATH.")
    log(f"Found {git_version}")

    gh_version = tool_version("gh")
    if gh_version is None:
        die(
            "GitHub CLI (gh) is not installed or not found in the system PATH.",
            GH_INSTALL_HINT,
        )
    log(f"Found {gh_version}")


def require(value, message):
    """Return value, or abort with message when it is empty"""
    if not value:
        die(message)
    return value
