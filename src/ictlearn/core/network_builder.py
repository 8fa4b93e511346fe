"""Network Builder game rules.

A scenario asks for a minimum set of devices and links. A submitted
network passes when it has enough of each device type, enough links and
every non-router device can reach a router over the links.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

import structlog

logger = structlog.get_logger(__name__)

DEVICE_TYPES = ("computer", "router", "switch", "server")

BASE_POINTS = 100
POINTS_PER_SCENARIO = 50


class NetworkError(Exception):
    """Submitted network is malformed."""

    pass


@dataclass
class Scenario:
    """A network to build."""

    id: int
    title: str
    description: str
    objective: str
    required_devices: dict[str, int]
    required_connections: int
    hints: list[str] = field(default_factory=list)

    @property
    def points(self) -> int:
        return BASE_POINTS + self.id * POINTS_PER_SCENARIO


@dataclass
class Device:
    id: str
    type: str


@dataclass
class Connection:
    from_device: str
    to_device: str


@dataclass
class NetworkCheckResult:
    """Outcome of checking a network."""

    scenario_id: int
    complete: bool
    points: int
    feedback: list[str]
    device_counts: dict[str, int]
    addresses: dict[str, str]


SCENARIOS: list[Scenario] = [
    Scenario(
        id=1,
        title="Home Network Setup",
        description="Create a basic home network with internet access",
        objective="Connect 2 computers to the internet through a router",
        required_devices={"router": 1, "computer": 2},
        required_connections=2,
        hints=[
            "Routers provide internet access to devices",
            "Computers need to connect to the router",
            "Each device needs an IP address in the same subnet",
        ],
    ),
    Scenario(
        id=2,
        title="Office Network",
        description="Set up a small office network with a server",
        objective="Connect 3 computers and 1 server through a switch and router",
        required_devices={"router": 1, "switch": 1, "computer": 3, "server": 1},
        required_connections=5,
        hints=[
            "Switches connect multiple devices in a LAN",
            "The router connects the LAN to the internet",
            "Servers typically have static IP addresses",
        ],
    ),
    Scenario(
        id=3,
        title="Multi-Floor Network",
        description="Design a network spanning multiple floors",
        objective="Create a network with wireless and wired connections across floors",
        required_devices={"router": 2, "switch": 1, "computer": 4},
        required_connections=6,
        hints=[
            "Multiple routers can extend network coverage",
            "Switches can connect devices on the same floor",
            "Plan IP addressing for different subnets",
        ],
    ),
]


def get_scenario(scenario_id: int) -> Scenario | None:
    for scenario in SCENARIOS:
        if scenario.id == scenario_id:
            return scenario
    return None


def assign_addresses(devices: list[Device]) -> dict[str, str]:
    """Give each device an address in order of placement.

    Routers get 192.168.<n>.1 for the n-th router. Other devices take the
    next host address in the subnet of the latest router (192.168.1.x
    before any router exists), starting at .2.
    """
    addresses = {}
    routers = 0
    hosts = 0
    for device in devices:
        if device.type == "router":
            routers += 1
            addresses[device.id] = f"192.168.{routers}.1"
        else:
            hosts += 1
            addresses[device.id] = f"192.168.{routers or 1}.{hosts + 1}"
    return addresses


def _validate(devices: list[Device], connections: list[Connection]) -> None:
    ids = set()
    for device in devices:
        if device.type not in DEVICE_TYPES:
            raise NetworkError(f"Unknown device type '{device.type}'")
        if device.id in ids:
            raise NetworkError(f"Duplicate device id '{device.id}'")
        ids.add(device.id)

    links = set()
    for conn in connections:
        for end in (conn.from_device, conn.to_device):
            if end not in ids:
                raise NetworkError(f"Connection to unknown device '{end}'")
        if conn.from_device == conn.to_device:
            raise NetworkError(f"Device '{conn.from_device}' cannot connect to itself")
        link = frozenset((conn.from_device, conn.to_device))
        if link in links:
            raise NetworkError(
                f"Devices '{conn.from_device}' and '{conn.to_device}' are already connected"
            )
        links.add(link)


def _reaching_router(devices: list[Device], connections: list[Connection]) -> set[str]:
    """Ids of devices with a path to some router."""
    neighbours: dict[str, set[str]] = {d.id: set() for d in devices}
    for conn in connections:
        neighbours[conn.from_device].add(conn.to_device)
        neighbours[conn.to_device].add(conn.from_device)

    reached = {d.id for d in devices if d.type == "router"}
    frontier = list(reached)
    while frontier:
        for other in neighbours[frontier.pop()]:
            if other not in reached:
                reached.add(other)
                frontier.append(other)
    return reached


def check_network(
    scenario: Scenario,
    devices: list[Device],
    connections: list[Connection],
) -> NetworkCheckResult:
    """Check a network against a scenario.

    Raises:
        NetworkError: On unknown device types or ids, self links or duplicate links
    """
    _validate(devices, connections)

    counts = Counter(d.type for d in devices)
    feedback = []

    for device_type, required in scenario.required_devices.items():
        missing = required - counts[device_type]
        if missing > 0:
            feedback.append(f"Need {missing} more {device_type}(s)")

    missing_links = scenario.required_connections - len(connections)
    if missing_links > 0:
        feedback.append(f"Need {missing_links} more connections")

    if counts["router"]:
        reached = _reaching_router(devices, connections)
        if any(d.id not in reached for d in devices):
            feedback.append("All devices should connect to the network through a router")

    complete = not feedback
    logger.info(
        "network_checked",
        scenario_id=scenario.id,
        devices=len(devices),
        connections=len(connections),
        complete=complete,
    )
    return NetworkCheckResult(
        scenario_id=scenario.id,
        complete=complete,
        points=scenario.points if complete else 0,
        feedback=feedback,
        device_counts=dict(counts),
        addresses=assign_addresses(devices),
    )
