"""
External command adapter - the single seam through which docker is invoked
"""
import logging
import subprocess
from typing import Sequence

from ..exceptions import CommandError

logger = logging.getLogger(__name__)


class CommandRunner:
    """Run an external command and return its stdout"""

    def run(self, args: Sequence[str]) -> str:
        raise NotImplementedError


class SubprocessRunner(CommandRunner):
    """CommandRunner backed by subprocess; blocks until the command exits"""

    def run(self, args: Sequence[str]) -> str:
        logger.debug(f"Running: {' '.join(args)}")
        try:
            result = subprocess.run(
                list(args),
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                check=True
            )
        except FileNotFoundError:
            raise CommandError(args)
        except subprocess.CalledProcessError as e:
            raise CommandError(args, e.returncode, e.stderr or "")
        return result.stdout.strip()
