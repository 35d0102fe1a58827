"""
runner.py - Execution of external git / gh commands

Every command is run with check=True, so a non-zero exit raises
subprocess.CalledProcessError and ends the bootstrap.
"""

import shlex
import subprocess

from .console import log


def format_command(command):
    return " ".join(shlex.quote(part) for part in command)


def run(command, capture=False, quiet=False):
    """
    Run command (a list of arguments) in the current directory.

    With capture=True stdout is returned as text, otherwise the command
    writes straight to the terminal and None is returned.
    """
    if not quiet:
        log(f"$ {format_command(command)}")

    if capture:
        result = subprocess.run(command, check=True, capture_output=True, text=True)
        return result.stdout

    subprocess.run(command, check=True)
    return None


def git(*args, capture=False):
    return run(["git", *args], capture=capture)


def gh(*args):
    return run(["gh", *args])
