"""Tests for bootstrap request assembly."""

from unittest.mock import AsyncMock

import pytest

from dockstrap.bootstrap.dispatcher import BootstrapDispatcher
from dockstrap.bootstrap.resolver import ConfigResolver
from dockstrap.models.bootstrap import BootstrapOptions
from dockstrap.models.config import KnifeConfig
from dockstrap.models.launch import LaunchSpec


def make_dispatcher(options=None, fallback=None, bootstrapper=None):
    """Create a dispatcher with a mocked bootstrapper."""
    resolver = ConfigResolver(options or BootstrapOptions(), fallback)
    return BootstrapDispatcher(resolver, bootstrapper or AsyncMock())


class TestBuildRequest:
    """Test BootstrapDispatcher.build_request."""

    def test_defaults(self):
        """Test a request built from defaults only."""
        dispatcher = make_dispatcher(BootstrapOptions(run_list=["role[web]"]))

        request = dispatcher.build_request(LaunchSpec(image="base:latest"), "172.17.0.2", "abc123")

        assert request.address == "172.17.0.2"
        assert request.node_name == "abc123"
        assert request.run_list == ["role[web]"]
        assert request.ssh.user == "root"
        assert request.ssh.port == "22"
        assert request.use_sudo is False
        assert request.use_sudo_password is False
        assert request.distro == "chef-full"
        assert request.environment is None
        assert request.template_file is None

    def test_explicit_node_name(self):
        """Test an explicit node name is used instead of the container id."""
        dispatcher = make_dispatcher(BootstrapOptions(node_name="web01"))

        request = dispatcher.build_request(LaunchSpec(image="img"), "10.0.0.5", "abc123")

        assert request.node_name == "web01"

    def test_non_root_user_needs_sudo(self):
        """Test a non-root SSH user turns on sudo and sudo password."""
        dispatcher = make_dispatcher(BootstrapOptions(ssh_user="deploy"))

        request = dispatcher.build_request(LaunchSpec(image="img"), "10.0.0.5", "abc123")

        assert request.ssh.user == "deploy"
        assert request.use_sudo is True
        assert request.use_sudo_password is True

    def test_fallback_user_needs_sudo(self):
        """Test elevation follows the resolved user, including fallback config."""
        dispatcher = make_dispatcher(fallback=KnifeConfig(ssh_user="ubuntu"))

        request = dispatcher.build_request(LaunchSpec(image="img"), "10.0.0.5", "abc123")

        assert request.ssh.user == "ubuntu"
        assert request.use_sudo is True

    def test_credentials_and_fallbacks(self):
        """Test credentials, port and fallback-only fields are carried over."""
        dispatcher = make_dispatcher(
            BootstrapOptions(ssh_password="secret", identity_file="~/.ssh/id_rsa"),
            KnifeConfig(environment="staging", template_file="/tmp/t.erb", distro="custom"),
        )

        request = dispatcher.build_request(
            LaunchSpec(image="img", ssh_port="2222"), "10.0.0.5", "abc123"
        )

        assert request.ssh.password == "secret"
        assert request.ssh.identity_file == "~/.ssh/id_rsa"
        assert request.ssh.port == "2222"
        assert request.environment == "staging"
        assert request.template_file == "/tmp/t.erb"
        assert request.distro == "custom"


@pytest.mark.asyncio
class TestDispatch:
    """Test BootstrapDispatcher.dispatch."""

    async def test_dispatch_hands_off_request(self):
        """Test the built request is passed to the bootstrapper."""
        bootstrapper = AsyncMock()
        dispatcher = make_dispatcher(bootstrapper=bootstrapper)

        request = await dispatcher.dispatch(LaunchSpec(image="img"), "172.17.0.2", "abc123")

        bootstrapper.bootstrap.assert_awaited_once_with(request)
        assert request.node_name == "abc123"
