# config.py (optional config.yaml defaults for the interactive prompts)

from dataclasses import dataclass
from pathlib import Path

import yaml

DEFAULT_HOST = "github.com"

# Keys of the init_repo section that may pre-fill prompt defaults
CONFIG_KEYS = ("github_username", "visibility", "main_branch", "host")


@dataclass
class RepoConfig:
    """Settings collected for one bootstrap run"""

    github_username: str
    repo_name: str
    description: str = ""
    visibility: str = "private"
    main_branch: str = "main"
    clone_existing: str = "no"
    existing_repo_url: str = ""
    host: str = DEFAULT_HOST

    @property
    def is_public(self):
        return self.visibility.lower() == "public"

    @property
    def remote_url(self):
        return f"https://{self.host}/{self.github_username}/{self.repo_name}.git"


def load_config(config_dir):
    """
    Load the init_repo section of config_dir/config.yaml.

    Returns an empty dict when no directory is given or the file does not
    exist. Unknown keys are dropped. yaml.YAMLError propagates, and is also raised
    when the file or its init_repo section is not a mapping.
    """
    if config_dir is None:
        return {}

    config_path = Path(config_dir) / "config.yaml"
    if not config_path.exists():
        return {}

    with open(config_path, "r") as f:
        config = yaml.safe_load(f) or {}
    if not isinstance(config, dict):
        raise yaml.YAMLError(f"{config_path} must contain a mapping at the top level")

    section = config.get("init_repo") or {}
    if not isinstance(section, dict):
        raise yaml.YAMLError(f"init_repo in {config_path} must be a mapping")
    return {key: str(section[key]) for key in CONFIG_KEYS if section.get(key)}
