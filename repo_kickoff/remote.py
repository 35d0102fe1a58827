"""
remote.py - Wiring of the 'origin' remote and the first push
"""

from .console import log
from .runner import git

ORIGIN = "origin"


def list_remotes():
    return git("remote", capture=True).split()


def configure_origin(remote_url):
    """Point origin at remote_url, updating it if it already exists"""
    if ORIGIN in list_remotes():
        log(f"Remote '{ORIGIN}' already exists. Updating the remote URL.")
        git("remote", "set-url", ORIGIN, remote_url)
    else:
        log(f"Adding remote '{ORIGIN}'.")
        git("remote", "add", ORIGIN, remote_url)


def publish(main_branch):
    git("branch", "-M", main_branch)
    git("push", "-u", ORIGIN, main_branch)
