"""
Container services - tear down and launch the ngrok container
"""
import logging
from typing import List, Optional

from ..config import DOCKER_BIN
from ..exceptions import CommandError
from ..models.schemas import TunnelConfig
from .commands import CommandRunner, SubprocessRunner

logger = logging.getLogger(__name__)


def build_remove_command(container_name: str, docker_bin: str = DOCKER_BIN) -> List[str]:
    """Generate the force-remove command for a named container"""
    return [docker_bin, "rm", container_name, "-f"]


def build_run_command(config: TunnelConfig, docker_bin: str = DOCKER_BIN) -> List[str]:
    """Generate the detached run command binding ngrok to host_ip:port"""
    return [
        docker_bin, "run", "-d",
        "--name", config.container_name,
        config.image,
        "ngrok", "http", config.binding,
    ]


class ContainerLauncher:
    """Replaces the named ngrok container with a fresh one"""

    def __init__(self, runner: Optional[CommandRunner] = None, docker_bin: str = DOCKER_BIN):
        self.runner = runner or SubprocessRunner()
        self.docker_bin = docker_bin

    def remove_container(self, container_name: str) -> bool:
        """
        Force-remove a container by name.

        Failure is expected when no such container exists, so it is logged
        and ignored. Returns True if docker reported a removal.
        """
        try:
            self.runner.run(build_remove_command(container_name, self.docker_bin))
        except CommandError as e:
            logger.debug(f"Ignoring failed removal of {container_name}: {e}")
            return False
        logger.info(f"Removed stale container {container_name}")
        return True

    def run_container(self, config: TunnelConfig) -> str:
        """Start the container detached and return the id docker prints"""
        container_id = self.runner.run(build_run_command(config, self.docker_bin))
        logger.info(f"Started container {config.container_name} ({container_id[:12]}) for {config.binding}")
        return container_id

    def launch(self, config: TunnelConfig) -> str:
        """Remove any previous instance, then start a new one"""
        self.remove_container(config.container_name)
        return self.run_container(config)
