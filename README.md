# icecore

Building blocks for Interactive Connectivity Establishment (ICE) agents.

`icecore` provides the pieces an ICE agent is assembled from:

- `icecore.candidate_type`: `CandidateType` (with `preference()`: 126 host,
  110 prflx, 100 srflx, 0 relay) and `CandidateRelatedAddress`
- `icecore.states`: `ConnectionState`, `GatheringState`,
  `CandidatePairState` and `Role` (`Role.from_text("controlling")`)
- `icecore.network_type`: `NetworkType`, `supported_network_types()` and
  `determine_network_type(network, ip)`
- `icecore.candidate_pair`: `CandidatePair`, whose `priority()` follows
  RFC 5245 section 5.7.2; it works with any candidate objects that offer
  `priority()` and `write_to(data, remote)`
- `icecore.stun`: a small STUN codec (`Message`, `AttrType`,
  `XORMappedAddress`, `binding_request()`), `get_xor_mapped_address()` to
  ask a STUN server for the mapped address over a UDP socket, and
  `assert_username()`
- `icecore.priority` and `icecore.icecontrol`: the `PRIORITY`,
  `ICE-CONTROLLED` and `ICE-CONTROLLING` attributes (`PriorityAttr`,
  `AttrControlled`, `AttrControlling`, `AttrControl`)
- `icecore.external_ip_mapper`: 1:1 NAT address mapping
  (`new_external_ip_mapper`, `ExternalIPMapper`, `IPMapping`)
- `icecore.netutil`: local interface discovery (`local_interfaces`, using
  psutil), `listen_udp_in_port_range` and `is_supported_ipv6_partial`
- `icecore.rand`: `generate_ufrag()`, `generate_pwd()` and
  `CandidateIDGenerator`; `icecore.mdns`: `MulticastDNSMode` and
  `generate_multicast_dns_name()`
- `icecore.taskloop`: `TaskLoop`, which runs tasks one at a time on a
  dedicated thread
- `icecore.packet_conn`: `PacketConn`, a connected socket used like a
  packet socket
- `icecore.stats`: the `CandidatePairStats` and `CandidateStats` records

## Installation

```
pip install icecore
```

## Examples

Map local addresses to public ones:

```python
from icecore.candidate_type import CandidateType
from icecore.external_ip_mapper import new_external_ip_mapper

mapper = new_external_ip_mapper(
    CandidateType.UNSPECIFIED, ["1.2.3.4/10.0.0.1", "1.2.3.5/10.0.0.2"]
)
print(mapper.find_external_ip("10.0.0.2"))  # 1.2.3.5
```

Add and read back a PRIORITY attribute in a STUN Binding request:

```python
from icecore.priority import PriorityAttr
from icecore.stun import Message, binding_request

request = binding_request()
PriorityAttr(2130706431).add_to(request)
decoded = Message.decode(request.encode())
print(PriorityAttr.get_from(decoded).value)  # 2130706431
```

Pick a network type from a protocol name and an address:

```python
from ipaddress import ip_address
from icecore.network_type import determine_network_type

print(determine_network_type("UDP", ip_address("192.168.0.1")))  # udp4
```

Run work serially on a task loop:

```python
from icecore.taskloop import TaskLoop

with TaskLoop() as loop:
    print(loop.run(lambda _loop: 6 * 7))  # 42
```

Errors are raised as subclasses of `icecore.errors.IceError`, for example
`InvalidNAT1To1IPMappingError` or `PortError`; STUN problems raise
subclasses of `icecore.stun.StunError`, such as `AttributeNotFoundError`
and `AttributeSizeError`.

## What it does not do

`icecore` is a library of parts, not an ICE agent. It does not gather
candidates, run connectivity checks, nominate or select pairs, talk to
TURN servers, or run an mDNS responder, and it has no command-line
program. `get_xor_mapped_address()` is its only network exchange.

## Running the tests

```
pip install "icecore[test]"
pytest
```