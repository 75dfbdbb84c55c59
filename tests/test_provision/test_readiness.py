"""Tests for the readiness gate."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from dockstrap.models.config import ReadinessConfig
from dockstrap.provision.readiness import ReadinessGate, container_port


@pytest.mark.parametrize("mapping,expected", [
    ("22", 22),
    ("2222:22", 22),
    ("127.0.0.1:2222:22", 22),
    ("22/tcp", 22),
])
def test_container_port(mapping, expected):
    """Test the in-container port is taken from a docker port mapping."""
    assert container_port(mapping) == expected


@pytest.mark.asyncio
class TestReadinessGate:
    """Test ReadinessGate.wait."""

    async def test_fixed_delay(self):
        """Test the default gate just sleeps."""
        gate = ReadinessGate(ReadinessConfig(delay=1.0))

        with patch("dockstrap.provision.readiness.asyncio.sleep", new_callable=AsyncMock) as mock_sleep:
            with patch("dockstrap.provision.readiness.asyncio.open_connection") as mock_open:
                result = await gate.wait("172.17.0.2", "22")

        assert result is False
        mock_sleep.assert_awaited_once_with(1.0)
        mock_open.assert_not_called()

    async def test_poll_until_open(self):
        """Test polling stops once the port accepts connections."""
        gate = ReadinessGate(ReadinessConfig(delay=0, poll=True, timeout=10, interval=0.01))
        gate._port_open = AsyncMock(side_effect=[False, False, True])

        result = await gate.wait("172.17.0.2", "2222:22")

        assert result is True
        assert gate._port_open.await_count == 3
        gate._port_open.assert_awaited_with("172.17.0.2", 22)

    async def test_poll_timeout_does_not_fail(self):
        """Test an exhausted poll only warns."""
        gate = ReadinessGate(ReadinessConfig(delay=0, poll=True, timeout=0.05, interval=0.01))
        gate._port_open = AsyncMock(return_value=False)

        result = await gate.wait("172.17.0.2", "22")

        assert result is False
        assert gate._port_open.await_count >= 1

    async def test_port_open_closes_connection(self):
        """Test a successful probe closes its connection."""
        gate = ReadinessGate(ReadinessConfig(interval=0.5))
        writer = MagicMock()
        writer.wait_closed = AsyncMock()

        with patch(
            "dockstrap.provision.readiness.asyncio.open_connection",
            new_callable=AsyncMock,
            return_value=(MagicMock(), writer),
        ):
            assert await gate._port_open("172.17.0.2", 22) is True

        writer.close.assert_called_once()

    async def test_port_refused(self):
        """Test a refused connection reports closed."""
        gate = ReadinessGate()

        with patch(
            "dockstrap.provision.readiness.asyncio.open_connection",
            new_callable=AsyncMock,
            side_effect=ConnectionRefusedError(),
        ):
            assert await gate._port_open("172.17.0.2", 22) is False

    async def test_port_range_skips_polling(self, caplog):
        """Test a port range mapping skips polling instead of failing."""
        gate = ReadinessGate(ReadinessConfig(delay=0, poll=True, timeout=1, interval=0.01))
        gate._port_open = AsyncMock(return_value=True)

        result = await gate.wait("172.17.0.2", "2222-2223:22-23")

        assert result is False
        gate._port_open.assert_not_called()
        assert "2222-2223:22-23" in caplog.text
