"""
Container launcher unit tests
"""
import pytest

from ngrok_docker.exceptions import CommandError
from ngrok_docker.models.schemas import TunnelConfig
from ngrok_docker.services.container import (
    ContainerLauncher,
    build_remove_command,
    build_run_command,
)

from conftest import FakeRunner


def test_build_run_command_default_port():
    """Test the default port is 8080"""
    config = TunnelConfig(host_ip="192.168.1.20")
    command = build_run_command(config)

    assert command[-3:] == ["ngrok", "http", "192.168.1.20:8080"]


def test_build_run_command_custom_port():
    """Test host address and port are combined in one binding"""
    config = TunnelConfig(host_ip="192.168.1.20", port=3000)
    command = build_run_command(config)

    assert command == [
        "docker", "run", "-d",
        "--name", "ngrok",
        "wernight/ngrok",
        "ngrok", "http", "192.168.1.20:3000",
    ]


def test_build_run_command_custom_image_and_name():
    """Test container name and image come from config"""
    config = TunnelConfig(host_ip="10.0.0.7", container_name="tunnel", image="ngrok/ngrok:latest")
    command = build_run_command(config, docker_bin="podman")

    assert command[:5] == ["podman", "run", "-d", "--name", "tunnel"]
    assert "ngrok/ngrok:latest" in command


def test_build_remove_command():
    """Test remove is forced"""
    assert build_remove_command("ngrok") == ["docker", "rm", "ngrok", "-f"]


def test_launch_removes_before_run():
    """Test launch tears down the old container first"""
    runner = FakeRunner(run="4f1c2a9e8b7d")
    launcher = ContainerLauncher(runner)

    container_id = launcher.launch(TunnelConfig(host_ip="192.168.1.20", port=3000))

    assert runner.subcommands() == ["rm", "run"]
    assert container_id == "4f1c2a9e8b7d"


def test_launch_ignores_missing_container():
    """Test a failed removal does not stop the launch"""
    runner = FakeRunner(
        rm=CommandError(["docker", "rm", "ngrok", "-f"], 1, "Error: No such container: ngrok"),
        run="abc123",
    )
    launcher = ContainerLauncher(runner)

    assert launcher.launch(TunnelConfig(host_ip="192.168.1.20")) == "abc123"
    assert runner.subcommands() == ["rm", "run"]


def test_launch_twice_replaces_container():
    """Test repeated launches each remove the previous container"""
    runner = FakeRunner(run="abc123")
    launcher = ContainerLauncher(runner)
    config = TunnelConfig(host_ip="192.168.1.20")

    launcher.launch(config)
    launcher.launch(config)

    assert runner.subcommands() == ["rm", "run", "rm", "run"]
    assert runner.calls[2] == ["docker", "rm", "ngrok", "-f"]


def test_remove_container_reports_result():
    """Test remove_container returns whether docker removed anything"""
    assert ContainerLauncher(FakeRunner(rm="ngrok")).remove_container("ngrok") is True
    failing = FakeRunner(rm=CommandError(["docker"], None))
    assert ContainerLauncher(failing).remove_container("ngrok") is False


def test_run_container_failure_propagates():
    """Test a failed docker run is not swallowed"""
    runner = FakeRunner(run=CommandError(["docker", "run"], 125, "Unable to find image"))
    launcher = ContainerLauncher(runner)

    with pytest.raises(CommandError):
        launcher.launch(TunnelConfig(host_ip="192.168.1.20"))
