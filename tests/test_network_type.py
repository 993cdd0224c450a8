import ipaddress

import pytest

from icecore.errors import DetermineNetworkTypeError
from icecore.network_type import (
    NetworkType,
    determine_network_type,
    supported_network_types,
)

IPV4 = ipaddress.ip_address("192.168.0.1")
IPV6 = ipaddress.ip_address("fe80::a3:6ff:fec4:5454")


@pytest.mark.parametrize(
    "network, ip, expected",
    [
        ("udp", IPV4, NetworkType.UDP4),
        ("UDP", IPV4, NetworkType.UDP4),
        ("udp", IPV6, NetworkType.UDP6),
        ("UDP", IPV6, NetworkType.UDP6),
        ("tcp", IPV4, NetworkType.TCP4),
        ("TCP", IPV6, NetworkType.TCP6),
    ],
)
def test_network_type_parsing_success(network, ip, expected):
    assert determine_network_type(network, ip) is expected


def test_network_type_parsing_failure():
    with pytest.raises(DetermineNetworkTypeError) as info:
        determine_network_type("junkNetwork", IPV6)
    assert "junkNetwork" in str(info.value)


def test_ipv4_mapped_ipv6_counts_as_ipv4():
    mapped = ipaddress.ip_address("::ffff:10.0.0.1")
    assert determine_network_type("udp", mapped) is NetworkType.UDP4


def test_accepts_ip_string():
    assert determine_network_type("tcp4", "10.0.0.1") is NetworkType.TCP4


def test_network_type_is_udp():
    assert NetworkType.UDP4.is_udp()
    assert NetworkType.UDP6.is_udp()
    assert not NetworkType.UDP4.is_tcp()
    assert not NetworkType.UDP6.is_tcp()


def test_network_type_is_tcp():
    assert NetworkType.TCP4.is_tcp()
    assert NetworkType.TCP6.is_tcp()
    assert not NetworkType.TCP4.is_udp()
    assert not NetworkType.TCP6.is_udp()


def test_string_forms():
    assert [str(t) for t in supported_network_types()] == ["udp4", "udp6", "tcp4", "tcp6"]


def test_network_short_and_reliable():
    assert NetworkType.UDP6.network_short() == "udp"
    assert NetworkType.TCP4.network_short() == "tcp"
    assert NetworkType.TCP6.is_reliable()
    assert not NetworkType.UDP4.is_reliable()


def test_ip_family():
    assert NetworkType.UDP4.is_ipv4() and not NetworkType.UDP4.is_ipv6()
    assert NetworkType.TCP6.is_ipv6() and not NetworkType.TCP6.is_ipv4()


def test_supported_network_types_order():
    assert supported_network_types() == [
        NetworkType.UDP4,
        NetworkType.UDP6,
        NetworkType.TCP4,
        NetworkType.TCP6,
    ]