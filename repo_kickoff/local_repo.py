"""
local_repo.py - Preparation of the local Git repository

Either clones an existing repository (optionally dropping its history)
or creates a brand new one with a generated README.md. Both paths leave
the process inside the repository directory.
"""

import os
import shutil
import stat
from pathlib import Path

from .console import die, is_yes, log
from .prompts import ask_remove_history
from .runner import git

INITIAL_COMMIT_MESSAGE = "Initial commit"


def readme_text(repo_name):
    return f"This is the {repo_name} repository."


def commit_all():
    git("add", ".")
    git("commit", "-m", INITIAL_COMMIT_MESSAGE)


def on_rm_error(func, path, exc_info):
    # git marks pack and object files read-only; clear the flag and retry
    os.chmod(path, stat.S_IWRITE)
    func(path)


def reset_history():
    """Replace the cloned history with a single fresh commit"""
    shutil.rmtree(".git", onerror=on_rm_error)
    git("init")
    commit_all()
    log("Git history removed and new repository initialized.", "SUCCESS")


def clone_existing(url, repo_name):
    git("clone", url, repo_name)
    os.chdir(repo_name)

    if is_yes(ask_remove_history()):
        reset_history()


def init_new(repo_name):
    log(f"Initializing a new local repository for {repo_name}.")
    try:
        Path(repo_name).mkdir()
    except FileExistsError:
        die(f"Error: A directory with the name '{repo_name}' already exists. Exiting script.")

    os.chdir(repo_name)
    git("init")
    log(f"New local Git repository initialized in {repo_name}.", "SUCCESS")

    Path("README.md").write_text(readme_text(repo_name))
    commit_all()
    log("Initial commit created with README.md.", "SUCCESS")
