"""
console.py - Terminal output and input helpers

All user-facing messages go through log() so that every step of the
bootstrap is prefixed and colored the same way.
"""

import sys


# Terminal colors for better readability
class Colors:
    HEADER = '\033[95m'
    BLUE = '\033[94m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'

    @classmethod
    def disable(cls):
        """Turn off ANSI codes (for --no-color or non-terminal output)"""
        for name in ("HEADER", "BLUE", "GREEN", "YELLOW", "RED", "ENDC", "BOLD"):
            setattr(cls, name, "")


def log(message, level="INFO"):
    """Log a message with appropriate formatting"""
    prefix = {
        "INFO": f"{Colors.BLUE}[INFO]{Colors.ENDC}",
        "SUCCESS": f"{Colors.GREEN}[SUCCESS]{Colors.ENDC}",
        "WARNING": f"{Colors.YELLOW}[WARNING]{Colors.ENDC}",
        "ERROR": f"{Colors.RED}[ERROR]{Colors.ENDC}",
        "PROMPT": f"{Colors.BOLD}{Colors.GREEN}[PROMPT]{Colors.ENDC}",
    }.get(level, f"[{level}]")

    stream = sys.stderr if level == "ERROR" else sys.stdout
    print(f"{prefix} {message}", file=stream)


def die(*messages):
    """Log one or more error lines and exit with status 1"""
    for message in messages:
        log(message, "ERROR")
    sys.exit(1)


def header(title):
    print(f"\n{Colors.HEADER}===== {title} ====={Colors.ENDC}")


def get_input(prompt, default=None):
    """
    Read a single line answer for prompt.

    Surrounding whitespace is stripped. An empty answer (or end of input)
    returns default when one is given, otherwise the empty string.
    """
    try:
        answer = input(f"{Colors.BOLD}{prompt}{Colors.ENDC}").strip()
    except EOFError:
        answer = ""

    if not answer and default is not None:
        return default
    return answer


def is_yes(answer):
    return answer.strip().lower() == "yes"
