"""Tests for the lesson calculators."""

import pytest

from ictlearn.core.lessons import (
    ConversionError,
    GateError,
    InvalidAddressError,
    SubnetError,
    UnknownGateError,
    binary_to_decimal,
    calculate_subnets,
    calculate_vlsm,
    convert_number,
    decimal_to_binary,
    decimal_to_hex,
    evaluate_gate,
    get_ip_class,
    get_network_info,
    hex_to_decimal,
    is_valid_ipv4,
    mask_prefix_length,
    prefix_to_mask,
    truth_table,
)


class TestNumberSystems:
    """Tests for base conversion."""

    @pytest.mark.parametrize(
        "value,from_base,to_base,expected",
        [
            ("1010", 2, 10, "10"),
            ("1011", 2, 10, "11"),
            ("25", 10, 2, "11001"),
            ("255", 10, 16, "FF"),
            ("ff", 16, 10, "255"),
            ("100", 10, 16, "64"),
            ("A3", 16, 2, "10100011"),
        ],
    )
    def test_convert(self, value, from_base, to_base, expected):
        """Lesson examples convert as shown on the page."""
        assert convert_number(value, from_base, to_base) == expected

    def test_helpers(self):
        """Named helpers wrap convert_number."""
        assert binary_to_decimal("1111") == 15
        assert decimal_to_binary(42) == "101010"
        assert hex_to_decimal("FF") == 255
        assert decimal_to_hex(171) == "AB"

    def test_invalid_digit(self):
        """Digits outside the base are rejected."""
        with pytest.raises(ConversionError):
            convert_number("102", 2, 10)

    def test_negative_rejected(self):
        """Negative numbers are not supported."""
        with pytest.raises(ConversionError):
            convert_number("-5", 10, 2)

    def test_non_ascii_digits_rejected(self):
        """Only ASCII digits count as decimal."""
        with pytest.raises(ConversionError):
            convert_number("\uff11\uff10", 10, 2)
        with pytest.raises(ConversionError):
            convert_number("\u0665", 10, 2)

    def test_unsupported_base(self):
        """Only bases 2, 10 and 16."""
        with pytest.raises(ConversionError):
            convert_number("17", 8, 10)


class TestIpAddressing:
    """Tests for IPv4 helpers."""

    def test_valid_ipv4(self):
        """Dotted quads with octets up to 255."""
        assert is_valid_ipv4("192.168.1.1")
        assert not is_valid_ipv4("256.1.1.1")
        assert not is_valid_ipv4("192.168.1")
        assert not is_valid_ipv4("a.b.c.d")
        assert not is_valid_ipv4("\uff11\uff19\uff12.168.1.1")
        assert not is_valid_ipv4("\u0661.1.1.1")

    @pytest.mark.parametrize(
        "ip,expected",
        [
            ("10.0.0.1", "Class A"),
            ("172.16.0.1", "Class B"),
            ("192.168.1.1", "Class C"),
            ("224.0.0.5", "Class D (Multicast)"),
            ("250.1.1.1", "Class E (Experimental)"),
            ("127.0.0.1", "Invalid"),
            ("300.1.1.1", "Invalid"),
        ],
    )
    def test_ip_class(self, ip, expected):
        """Class from the first octet."""
        assert get_ip_class(ip) == expected

    def test_network_info_class_c(self):
        """/24 breakdown."""
        info = get_network_info("192.168.1.10", "255.255.255.0")
        assert info.ip_class == "Class C"
        assert info.network == "192.168.1.0"
        assert info.broadcast == "192.168.1.255"
        assert info.prefix_length == 24
        assert info.first_host == "192.168.1.1"
        assert info.last_host == "192.168.1.254"
        assert info.usable_hosts == 254
        assert info.is_private is True

    def test_network_info_slash_26(self):
        """Non-octet boundary mask."""
        info = get_network_info("10.1.2.70", "255.255.255.192")
        assert info.network == "10.1.2.64"
        assert info.broadcast == "10.1.2.127"
        assert info.first_host == "10.1.2.65"
        assert info.last_host == "10.1.2.126"
        assert info.prefix_length == 26
        assert info.usable_hosts == 62

    def test_host_range_crosses_octets(self):
        """First and last host on a /16."""
        info = get_network_info("172.16.5.4", "255.255.0.0")
        assert info.first_host == "172.16.0.1"
        assert info.last_host == "172.16.255.254"

    def test_host_range_point_to_point(self):
        """A /31 uses both addresses."""
        info = get_network_info("10.0.0.1", "255.255.255.254")
        assert info.first_host == "10.0.0.0"
        assert info.last_host == "10.0.0.1"

    def test_public_address(self):
        """Public addresses are not private."""
        assert get_network_info("8.8.8.8", "255.0.0.0").is_private is False

    def test_invalid_mask(self):
        """Non-contiguous masks are rejected."""
        with pytest.raises(InvalidAddressError):
            get_network_info("192.168.1.1", "255.0.255.0")

    def test_invalid_ip(self):
        """Malformed address is rejected."""
        with pytest.raises(InvalidAddressError):
            get_network_info("192.168.1.300", "255.255.255.0")

    def test_prefix_round_trip(self):
        """Prefix and mask agree."""
        assert prefix_to_mask(26) == "255.255.255.192"
        assert mask_prefix_length("255.255.240.0") == 20


class TestSubnetting:
    """Tests for subnet plans."""

    def test_four_equal_subnets(self):
        """Borrowing 2 bits gives four /26 subnets."""
        subnets = calculate_subnets("192.168.1.0", 2)
        assert len(subnets) == 4

        first = subnets[0]
        assert first.network == "192.168.1.0"
        assert first.first_host == "192.168.1.1"
        assert first.last_host == "192.168.1.62"
        assert first.broadcast == "192.168.1.63"
        assert first.subnet_mask == "255.255.255.192"
        assert first.prefix_length == 26
        assert first.usable_hosts == 62

        assert subnets[-1].network == "192.168.1.192"
        assert subnets[-1].broadcast == "192.168.1.255"

    def test_last_octet_ignored(self):
        """Subnets always start at .0 of the /24."""
        assert calculate_subnets("192.168.1.77", 1)[0].network == "192.168.1.0"

    @pytest.mark.parametrize("bits", [0, 7])
    def test_bits_out_of_range(self, bits):
        """Borrowed bits must be 1..6."""
        with pytest.raises(SubnetError):
            calculate_subnets("192.168.1.0", bits)

    def test_vlsm_largest_first(self):
        """Sales 50, IT 30, HR 10 scenario."""
        subnets = calculate_vlsm("192.168.10.0", [10, 50, 30])
        assert [s.required_hosts for s in subnets] == [50, 30, 10]
        assert [s.network for s in subnets] == ["192.168.10.0", "192.168.10.64", "192.168.10.96"]
        assert [s.prefix_length for s in subnets] == [26, 27, 28]
        assert subnets[1].broadcast == "192.168.10.95"
        assert subnets[2].wildcard_mask == "0.0.0.15"

    def test_vlsm_overflow(self):
        """Requirements beyond a /24 are rejected."""
        with pytest.raises(SubnetError):
            calculate_vlsm("192.168.10.0", [200, 100])

    def test_vlsm_empty(self):
        """At least one requirement is needed."""
        with pytest.raises(SubnetError):
            calculate_vlsm("192.168.10.0", [])


class TestLogicGates:
    """Tests for gate evaluation."""

    @pytest.mark.parametrize(
        "gate,inputs,expected",
        [
            ("AND", [True, True], True),
            ("AND", [True, False], False),
            ("OR", [False, True], True),
            ("NOT", [True], False),
            ("NAND", [True, True], False),
            ("NOR", [False, False], True),
            ("XOR", [True, False], True),
            ("XOR", [True, True, False], False),
            ("xor", [False, False, True], True),
        ],
    )
    def test_evaluate(self, gate, inputs, expected):
        """Gate outputs."""
        assert evaluate_gate(gate, inputs) is expected

    def test_unknown_gate(self):
        """Unknown gate names raise."""
        with pytest.raises(UnknownGateError):
            evaluate_gate("XNOR", [True, False])

    def test_not_takes_one_input(self):
        """NOT rejects two inputs."""
        with pytest.raises(GateError):
            evaluate_gate("NOT", [True, False])

    def test_and_needs_two_inputs(self):
        """Binary gates reject a single input."""
        with pytest.raises(GateError):
            evaluate_gate("AND", [True])

    def test_truth_table_and(self):
        """AND truth table in counting order."""
        rows = truth_table("AND")
        assert [r["inputs"] for r in rows] == [
            [False, False],
            [False, True],
            [True, False],
            [True, True],
        ]
        assert [r["output"] for r in rows] == [False, False, False, True]

    def test_truth_table_not(self):
        """NOT has two rows."""
        rows = truth_table("NOT")
        assert rows == [
            {"inputs": [False], "output": True},
            {"inputs": [True], "output": False},
        ]
