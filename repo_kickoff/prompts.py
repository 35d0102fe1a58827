# prompts.py - Ordered interactive collection of the repository settings

from .config import DEFAULT_HOST, RepoConfig
from .console import get_input
from .validator import require


def ask(question, defaults, key, fallback=None):
    return get_input(question, default=defaults.get(key, fallback))


def collect_config(defaults=None):
    """
    Ask for the six settings in their fixed order and return a RepoConfig.

    defaults comes from config.load_config() and only changes what an empty
    answer means; the order of questions never changes.
    """
    defaults = defaults or {}

    github_username = require(
        ask("Enter your GitHub username: ", defaults, "github_username"),
        "GitHub username cannot be empty.",
    )
    repo_name = require(
        get_input("Enter the new repository name: "),
        "Repository name cannot be empty.",
    )
    description = get_input("Enter a description for the repository (optional): ")
    visibility = ask(
        "Enter visibility (private/public) [default: private]: ",
        defaults, "visibility", "private",
    )
    main_branch = ask(
        "Enter the main branch name (default: main): ",
        defaults, "main_branch", "main",
    )
    clone_existing = get_input(
        "Is this a cloned repo you want to push to GitHub? (yes/no) [default: no]: ",
        default="no",
    )

    return RepoConfig(
        github_username=github_username,
        repo_name=repo_name,
        description=description,
        visibility=visibility,
        main_branch=main_branch,
        clone_existing=clone_existing,
        host=defaults.get("host", DEFAULT_HOST),
    )


def ask_clone_url():
    return require(
        get_input("Enter the URL of the repository to clone: "),
        "Repository URL cannot be empty. Exiting.",
    )


def ask_remove_history():
    return get_input(
        "Do you want to remove Git history? (yes/no) [default: no]: ",
        default="no",
    )
