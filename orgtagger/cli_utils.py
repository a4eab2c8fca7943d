"""
Common CLI utilities and decorators for consistent command behavior.
"""

import sys
import logging
import click
from functools import wraps
from typing import Any, Dict, Optional

from .config import load_config, setup_logging, get_token
from .exit_codes import (
    INTERRUPTED, AbortedError, CommandError, get_exit_code_for_exception
)
from .infra import GitHubClient

logger = logging.getLogger("orgtagger")

TTY_PATH = "/dev/tty"


def handle_errors(func):
    """
    Decorator that turns any error raised by a command into a diagnostic on
    stderr and a non-zero exit. Nothing is retried; the first error ends the run.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except click.ClickException:
            # Click exceptions already have their exit code
            raise
        except KeyboardInterrupt:
            logger.error("Interrupted by user")
            sys.exit(INTERRUPTED)
        except CommandError as e:
            logger.error(str(e))
            sys.exit(e.exit_code)
        except Exception as e:
            logger.error(str(e) or type(e).__name__, exc_info=logger.isEnabledFor(logging.DEBUG))
            sys.exit(get_exit_code_for_exception(e))

    return wrapper


def prepare(verbose: bool) -> Dict[str, Any]:
    """Load configuration and set up logging for a command run."""
    # Log to stderr before the config is known, so config errors are visible.
    setup_logging({}, verbose)
    config = load_config()
    setup_logging(config, verbose)
    return config


def build_client(config: Dict[str, Any]) -> GitHubClient:
    """Construct the GitHub client a command passes to its services."""
    return GitHubClient.from_config(config, get_token())


def get_host(config: Dict[str, Any]) -> str:
    return config.get('github', {}).get('host', 'github.com')


def confirm_on_tty(question: str, tty_path: str = TTY_PATH) -> bool:
    """
    Ask a yes/no question on the controlling terminal.

    stdin already carries the tag list, so the answer is read from the
    terminal device directly.
    """
    click.echo(question, nl=False, err=True)
    try:
        with open(tty_path, 'r') as tty:
            answer = tty.readline()
    except OSError as e:
        raise CommandError(f"can't read confirmation from {tty_path}: {e}") from e
    return answer.strip()[:1] in ('y', 'Y')


def require_phrase(phrase: str, prompt: Optional[str] = None) -> None:
    """Make the user type ``phrase`` exactly, or abort."""
    prompt = prompt or f'Type "{phrase}" to create the tags above (this can NOT be undone)'
    try:
        text = click.prompt(prompt, default='', show_default=False, err=True)
    except click.Abort:
        # EOF or Ctrl-C at the prompt
        raise AbortedError() from None
    if text != phrase:
        raise AbortedError()


# Standard options that many commands share
common_options = {
    'verbose': click.option('-v', '--verbose', is_flag=True,
                            help='Enable verbose output on stderr'),
    'bump': click.option('--bump', 'bump_kind', default='minor', show_default=True,
                         type=click.Choice(['major', 'minor', 'patch']),
                         help='Version component to increment'),
    'exclude_archived': click.option('--exclude-archived', is_flag=True,
                                     help='Skip archived repositories'),
}


def add_common_options(*option_names):
    """
    Decorator to add common options to a command.

    Example:
        @add_common_options('verbose', 'bump')
        def my_command(verbose, bump_kind):
            ...
    """
    def decorator(func):
        for name in reversed(option_names):
            if name in common_options:
                func = common_options[name](func)
        return func
    return decorator
