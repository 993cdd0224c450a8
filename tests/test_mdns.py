import uuid

from icecore.mdns import MulticastDNSMode, generate_multicast_dns_name

_SUFFIX = ".local"


def test_generate_multicast_dns_name_is_uuid4_local():
    name = generate_multicast_dns_name()
    assert name[-len(_SUFFIX):] == _SUFFIX
    stem = name[: -len(_SUFFIX)]
    parsed = uuid.UUID(stem)
    assert parsed.version == 4
    assert str(parsed) == stem.lower()
    assert len(stem) == 36


def test_generated_names_are_distinct():
    names = {generate_multicast_dns_name() for _ in range(50)}
    assert len(names) == 50


def test_modes_are_ordered_from_disabled_to_gather():
    modes = [MulticastDNSMode(value) for value in (1, 2, 3)]
    assert modes == [
        MulticastDNSMode.DISABLED,
        MulticastDNSMode.QUERY_ONLY,
        MulticastDNSMode.QUERY_AND_GATHER,
    ]
    assert sorted(modes, reverse=True)[0] is MulticastDNSMode.QUERY_AND_GATHER