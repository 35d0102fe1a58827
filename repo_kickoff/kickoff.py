# kickoff.py - Entry point: bootstrap a local repository and publish it to GitHub

import argparse
import subprocess
import sys

import yaml

from .config import load_config
from .console import Colors, header, is_yes, log
from .create_repo import create_repo
from .local_repo import clone_existing, init_new
from .prompts import ask_clone_url, collect_config
from .remote import configure_origin, publish
from .runner import format_command
from .validator import check_tools, show_prerequisites


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Create a Git repository (new or cloned) and publish it to GitHub with the gh CLI."
    )
    parser.add_argument(
        "--config-dir", type=str, default=None,
        help="Folder containing a config.yaml with an init_repo section of prompt defaults",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    return parser.parse_args(argv)


def bootstrap(defaults):
    """Run every step in order; any failure ends the run"""
    show_prerequisites()
    check_tools()

    cfg = collect_config(defaults)

    if is_yes(cfg.clone_existing):
        cfg.existing_repo_url = ask_clone_url()
        clone_existing(cfg.existing_repo_url, cfg.repo_name)
    else:
        init_new(cfg.repo_name)

    create_repo(cfg)
    configure_origin(cfg.remote_url)
    publish(cfg.main_branch)

    log(f"Repository {cfg.repo_name} created and pushed successfully.", "SUCCESS")
    return cfg


def main(argv=None):
    args = parse_args(argv)
    if args.no_color or not sys.stdout.isatty():
        Colors.disable()

    header("GitHub Repository Kickoff")

    try:
        defaults = load_config(args.config_dir)
    except yaml.YAMLError as e:
        log(f"Failed to load configuration: {e}", "ERROR")
        sys.exit(1)

    try:
        bootstrap(defaults)
    except subprocess.CalledProcessError as e:
        log(f"Command failed with exit status {e.returncode}: {format_command(e.cmd)}", "ERROR")
        sys.exit(1)
    except OSError as e:
        log(f"{e.strerror or e}: {e.filename}" if e.filename else str(e), "ERROR")
        sys.exit(1)
    except KeyboardInterrupt:
        print()
        log("Aborted.", "WARNING")
        sys.exit(1)