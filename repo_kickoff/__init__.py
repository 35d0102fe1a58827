"""
repo_kickoff package for bootstrapping a Git repository and publishing it

This package provides modules for collecting repository settings
interactively, preparing the local Git repository (fresh or cloned),
creating the GitHub repository with the GitHub CLI and pushing to it.
"""

__version__ = "1.0.0"

from . import config
from . import console
from . import create_repo
from . import local_repo
from . import prompts
from . import remote
from . import runner
from . import validator
