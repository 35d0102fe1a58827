# create_repo.py (creates the GitHub repository with the GitHub CLI)

from .console import log
from .runner import gh


def build_create_command(repo_name, public=False, description=""):
    visibility = "--public" if public else "--private"
    command = ["repo", "create", repo_name, visibility]
    if description:
        command.extend(["--description", description])
    return command


def create_repo(cfg):
    """Run `gh repo create` for the collected RepoConfig"""
    log(f"Creating repository: {cfg.repo_name}")
    gh(*build_create_command(cfg.repo_name, cfg.is_public, cfg.description))
    log(f"Successfully created GitHub repository: {cfg.repo_name} ({cfg.visibility})", "SUCCESS")
