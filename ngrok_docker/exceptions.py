"""
Exception types raised by ngrok-docker services
"""
from typing import Optional, Sequence


class NgrokDockerError(Exception):
    """Base class for all ngrok-docker errors"""


class ConfigError(NgrokDockerError):
    """Run configuration failed validation"""


class CommandError(NgrokDockerError):
    """An external command could not be run or exited non-zero"""

    def __init__(
        self,
        args: Sequence[str],
        returncode: Optional[int] = None,
        stderr: str = ""
    ):
        self.command = list(args)
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip() or "command not found"
        super().__init__(f"{' '.join(self.command)} failed ({returncode}): {detail}")


class TunnelStatusError(NgrokDockerError):
    """Tunnel status is unavailable or does not report a public URL"""


class MaxRetriesExceeded(NgrokDockerError):
    """Polling gave up after the retry ceiling was reached"""

    def __init__(self, message: str = "maximum retries exceeded"):
        super().__init__(message)
