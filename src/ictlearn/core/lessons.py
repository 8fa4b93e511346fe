"""Calculators behind the lesson pages.

Topics covered:
- Number systems: binary / decimal / hexadecimal conversion
- IP addressing: validation, classful class, network and broadcast addresses
- Subnetting: equal subnets of a /24 and VLSM allocation
- Logic gates: AND, OR, NOT, NAND, NOR, XOR evaluation and truth tables

All functions are pure; invalid input raises the module's error classes.
"""

from __future__ import annotations

import itertools
import math
import re
from dataclasses import asdict, dataclass
from typing import Any, Callable

# =============================================================================
# ERRORS
# =============================================================================


class ConversionError(Exception):
    """Value cannot be read in the requested base."""

    pass


class InvalidAddressError(Exception):
    """Malformed IPv4 address or subnet mask."""

    pass


class SubnetError(Exception):
    """Subnet request cannot be satisfied."""

    pass


class GateError(Exception):
    """Bad logic gate request."""

    pass


class UnknownGateError(GateError):
    """Gate name is not one of the supported gates."""

    def __init__(self, gate: str):
        self.gate = gate
        super().__init__(f"Unknown gate '{gate}'. Expected one of: {', '.join(GATES)}")


# =============================================================================
# NUMBER SYSTEMS
# =============================================================================

SUPPORTED_BASES = (2, 10, 16)

_BASE_PATTERNS = {
    2: re.compile(r"^[01]+$"),
    10: re.compile(r"^[0-9]+$"),
    16: re.compile(r"^[0-9A-Fa-f]+$"),
}

_BASE_NAMES = {2: "binary", 10: "decimal", 16: "hexadecimal"}


def is_valid_number(value: str, base: int) -> bool:
    """Check that value is a non-negative integer literal in base."""
    pattern = _BASE_PATTERNS.get(base)
    if pattern is None:
        return False
    return bool(pattern.match(value.strip()))


def format_number(number: int, base: int) -> str:
    """Render a non-negative integer in base 2, 10 or 16 (hex uppercase)."""
    if base == 2:
        return format(number, "b")
    if base == 16:
        return format(number, "X")
    if base == 10:
        return str(number)
    raise ConversionError(f"Unsupported base {base}. Expected one of {SUPPORTED_BASES}")


def convert_number(value: str, from_base: int, to_base: int) -> str:
    """Convert a number literal between binary, decimal and hexadecimal.

    Args:
        value: Literal without prefix (e.g. "1010", "255", "ff")
        from_base: Base of value
        to_base: Target base

    Returns:
        The literal in to_base

    Raises:
        ConversionError: On unsupported base or malformed value
    """
    for base in (from_base, to_base):
        if base not in SUPPORTED_BASES:
            raise ConversionError(
                f"Unsupported base {base}. Expected one of {SUPPORTED_BASES}"
            )

    if not is_valid_number(value, from_base):
        raise ConversionError(f"'{value}' is not a valid {_BASE_NAMES[from_base]} number")

    return format_number(int(value.strip(), from_base), to_base)


def binary_to_decimal(binary: str) -> int:
    return int(convert_number(binary, 2, 10))


def decimal_to_binary(decimal: int) -> str:
    return convert_number(str(decimal), 10, 2)


def hex_to_decimal(hex_value: str) -> int:
    return int(convert_number(hex_value, 16, 10))


def decimal_to_hex(decimal: int) -> str:
    return convert_number(str(decimal), 10, 16)


# =============================================================================
# IP ADDRESSING
# =============================================================================

_IPV4_PATTERN = re.compile(r"^([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})$")


@dataclass
class NetworkInfo:
    """Address breakdown for an IP and mask pair."""

    ip: str
    subnet_mask: str
    ip_class: str
    network: str
    broadcast: str
    first_host: str
    last_host: str
    prefix_length: int
    usable_hosts: int
    is_private: bool

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def is_valid_ipv4(address: str) -> bool:
    """Dotted quad with every octet in 0..255."""
    match = _IPV4_PATTERN.match(address.strip())
    if not match:
        return False
    return all(int(octet) <= 255 for octet in match.groups())


def parse_ipv4(address: str) -> list[int]:
    """Split a dotted quad into four ints.

    Raises:
        InvalidAddressError: If address is not a valid IPv4 address
    """
    if not is_valid_ipv4(address):
        raise InvalidAddressError(f"'{address}' is not a valid IPv4 address")
    return [int(octet) for octet in address.strip().split(".")]


def format_ipv4(octets: list[int]) -> str:
    return ".".join(str(octet) for octet in octets)


def _to_int(octets: list[int]) -> int:
    return (octets[0] << 24) | (octets[1] << 16) | (octets[2] << 8) | octets[3]


def _from_int(value: int) -> str:
    return format_ipv4([(value >> shift) & 0xFF for shift in (24, 16, 8, 0)])


def get_ip_class(address: str) -> str:
    """Classful address class from the first octet."""
    if not is_valid_ipv4(address):
        return "Invalid"

    first = parse_ipv4(address)[0]
    if 1 <= first <= 126:
        return "Class A"
    if 128 <= first <= 191:
        return "Class B"
    if 192 <= first <= 223:
        return "Class C"
    if 224 <= first <= 239:
        return "Class D (Multicast)"
    if 240 <= first <= 255:
        return "Class E (Experimental)"
    # 0.x.x.x and 127.x.x.x (loopback)
    return "Invalid"


def is_private_ipv4(address: str) -> bool:
    """RFC 1918 ranges: 10/8, 172.16/12, 192.168/16."""
    a, b, _, _ = parse_ipv4(address)
    return a == 10 or (a == 172 and 16 <= b <= 31) or (a == 192 and b == 168)


def mask_prefix_length(mask: str) -> int:
    """Number of leading one bits in a subnet mask.

    Raises:
        InvalidAddressError: If the mask is malformed or not contiguous
    """
    octets = parse_ipv4(mask)
    bits = "".join(format(octet, "08b") for octet in octets)
    if "01" in bits:
        raise InvalidAddressError(f"Subnet mask '{mask}' is not contiguous")
    return bits.count("1")


def prefix_to_mask(prefix_length: int) -> str:
    if not 0 <= prefix_length <= 32:
        raise InvalidAddressError(f"Prefix length must be 0..32, got {prefix_length}")
    value = (0xFFFFFFFF << (32 - prefix_length)) & 0xFFFFFFFF
    return format_ipv4([(value >> shift) & 0xFF for shift in (24, 16, 8, 0)])


def usable_hosts_for_prefix(prefix_length: int) -> int:
    host_bits = 32 - prefix_length
    if host_bits < 2:
        return 0
    return 2**host_bits - 2


def get_network_info(address: str, mask: str) -> NetworkInfo:
    """Network and broadcast addresses for address/mask.

    Raises:
        InvalidAddressError: If address or mask is invalid
    """
    ip_octets = parse_ipv4(address)
    mask_octets = parse_ipv4(mask)
    prefix = mask_prefix_length(mask)

    network = [octet & m for octet, m in zip(ip_octets, mask_octets)]
    broadcast = [octet | (255 - m) for octet, m in zip(network, mask_octets)]

    # /31 and /32 have no network/broadcast pair to skip
    first, last = _to_int(network), _to_int(broadcast)
    if prefix <= 30:
        first, last = first + 1, last - 1

    return NetworkInfo(
        ip=format_ipv4(ip_octets),
        subnet_mask=format_ipv4(mask_octets),
        ip_class=get_ip_class(address),
        network=format_ipv4(network),
        broadcast=format_ipv4(broadcast),
        first_host=_from_int(first),
        last_host=_from_int(last),
        prefix_length=prefix,
        usable_hosts=usable_hosts_for_prefix(prefix),
        is_private=is_private_ipv4(address),
    )


# =============================================================================
# SUBNETTING
# =============================================================================

MAX_SUBNET_BITS = 6


@dataclass
class SubnetInfo:
    """One subnet carved out of a /24."""

    network: str
    first_host: str
    last_host: str
    broadcast: str
    subnet_mask: str
    wildcard_mask: str
    prefix_length: int
    total_hosts: int
    usable_hosts: int
    required_hosts: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _subnet(prefix: list[int], start: int, size: int, required: int | None = None) -> SubnetInfo:
    def addr(last: int) -> str:
        return format_ipv4(prefix + [last])

    return SubnetInfo(
        network=addr(start),
        first_host=addr(start + 1),
        last_host=addr(start + size - 2),
        broadcast=addr(start + size - 1),
        subnet_mask=f"255.255.255.{256 - size}",
        wildcard_mask=f"0.0.0.{size - 1}",
        prefix_length=32 - int(math.log2(size)),
        total_hosts=size,
        usable_hosts=size - 2,
        required_hosts=required,
    )


def calculate_subnets(network: str, subnet_bits: int) -> list[SubnetInfo]:
    """Split the /24 containing network into 2**subnet_bits equal subnets.

    The last octet of network is ignored; subnets start at .0.

    Raises:
        InvalidAddressError: If network is not a valid address
        SubnetError: If subnet_bits is outside 1..6
    """
    octets = parse_ipv4(network)
    if not 1 <= subnet_bits <= MAX_SUBNET_BITS:
        raise SubnetError(f"Subnet bits must be between 1 and {MAX_SUBNET_BITS}, got {subnet_bits}")

    size = 2 ** (8 - subnet_bits)
    return [_subnet(octets[:3], i * size, size) for i in range(2**subnet_bits)]


def calculate_vlsm(network: str, host_requirements: list[int]) -> list[SubnetInfo]:
    """Allocate variable length subnets inside the /24 containing network.

    Requirements are served largest first. Each block is hosts + 2
    rounded up to a power of two.

    Raises:
        InvalidAddressError: If network is not a valid address
        SubnetError: On empty, non-positive or oversized requirements
    """
    octets = parse_ipv4(network)
    if not host_requirements:
        raise SubnetError("At least one host requirement is needed")
    if any(hosts < 1 for hosts in host_requirements):
        raise SubnetError("Host requirements must be positive")

    subnets: list[SubnetInfo] = []
    offset = 0
    for hosts in sorted(host_requirements, reverse=True):
        size = 2 ** math.ceil(math.log2(hosts + 2))
        if offset + size > 256:
            raise SubnetError(
                f"Requirements do not fit in a /24 ({offset + size} addresses needed)"
            )
        subnets.append(_subnet(octets[:3], offset, size, required=hosts))
        offset += size

    return subnets


# =============================================================================
# LOGIC GATES
# =============================================================================

GATES: dict[str, Callable[[list[bool]], bool]] = {
    "AND": lambda inputs: all(inputs),
    "OR": lambda inputs: any(inputs),
    "NOT": lambda inputs: not inputs[0],
    "NAND": lambda inputs: not all(inputs),
    "NOR": lambda inputs: not any(inputs),
    "XOR": lambda inputs: sum(1 for i in inputs if i) == 1,
}

GATE_DESCRIPTIONS: dict[str, str] = {
    "AND": "Output is HIGH only when ALL inputs are HIGH",
    "OR": "Output is HIGH when ANY input is HIGH",
    "NOT": "Output is the OPPOSITE of the input",
    "NAND": "Output is LOW only when ALL inputs are HIGH",
    "NOR": "Output is LOW when ANY input is HIGH",
    "XOR": "Output is HIGH when EXACTLY ONE input is HIGH",
}


def _normalize_gate(gate: str) -> str:
    name = gate.strip().upper()
    if name not in GATES:
        raise UnknownGateError(gate)
    return name


def evaluate_gate(gate: str, inputs: list[bool]) -> bool:
    """Output of gate for the given inputs.

    NOT takes exactly one input, every other gate two or more.

    Raises:
        UnknownGateError: If gate is not supported
        GateError: On a wrong number of inputs
    """
    name = _normalize_gate(gate)
    if name == "NOT" and len(inputs) != 1:
        raise GateError("NOT gate takes exactly one input")
    if name != "NOT" and len(inputs) < 2:
        raise GateError(f"{name} gate takes at least two inputs")
    return GATES[name](list(inputs))


def truth_table(gate: str, input_count: int = 2) -> list[dict[str, Any]]:
    """Every input combination and its output, in binary counting order."""
    name = _normalize_gate(gate)
    if name == "NOT":
        input_count = 1

    rows = []
    for combo in itertools.product([False, True], repeat=input_count):
        inputs = list(combo)
        rows.append({"inputs": inputs, "output": evaluate_gate(name, inputs)})
    return rows
