"""Exception hierarchy for the ICE agent."""

from __future__ import annotations


class IceError(Exception):
    """Base class of every error raised by the ICE agent."""

    default_message = "ice error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)

    @property
    def message(self) -> str:
        return str(self.args[0])


class SchemeTypeError(IceError, ValueError):
    """The scheme type of a URL could not be parsed."""

    default_message = "unknown scheme type"


class STUNQueryError(IceError, ValueError):
    """Query arguments were given in a STUN URL."""

    default_message = "queries not supported in STUN address"


class InvalidQueryError(IceError, ValueError):
    """A malformed query was given."""

    default_message = "invalid query"


class HostError(IceError, ValueError):
    """A malformed host name was given."""

    default_message = "invalid hostname"


class PortError(IceError, ValueError):
    """A malformed port or an unusable port range was given."""

    default_message = "invalid port"


class LocalUfragInsufficientBitsError(IceError, ValueError):
    """The local username fragment is shorter than 24 bits."""

    default_message = "local username fragment is less than 24 bits long"


class LocalPwdInsufficientBitsError(IceError, ValueError):
    """The local password is shorter than 128 bits."""

    default_message = "local password is less than 128 bits long"


class ProtoTypeError(IceError, ValueError):
    """An unsupported transport type was given."""

    default_message = "invalid transport protocol type"


class ClosedError(IceError):
    """The agent is closed."""

    default_message = "the agent is closed"


class NoCandidatePairsError(IceError):
    """The agent has no valid candidate pair."""

    default_message = "no candidate pairs available"


class CanceledByCallerError(IceError):
    """Connecting was canceled by the caller."""

    default_message = "connecting canceled by caller"


class MultipleStartError(IceError):
    """The agent was started twice."""

    default_message = "attempted to start agent twice"


class RemoteUfragEmptyError(IceError, ValueError):
    """The agent was started with an empty remote ufrag."""

    default_message = "remote ufrag is empty"


class RemotePwdEmptyError(IceError, ValueError):
    """The agent was started with an empty remote pwd."""

    default_message = "remote pwd is empty"


class NoOnCandidateHandlerError(IceError):
    """Gathering was started without a candidate handler."""

    default_message = "no OnCandidate provided"


class MultipleGatherAttemptedError(IceError):
    """Candidate gathering was requested while already gathering."""

    default_message = "attempting to gather candidates during gathering state"


class UsernameEmptyError(IceError, ValueError):
    """A TURN URL was given with an empty username."""

    default_message = "username is empty"


class PasswordEmptyError(IceError, ValueError):
    """A TURN URL was given with an empty password."""

    default_message = "password is empty"


class AddressParseFailedError(IceError, ValueError):
    """A candidate address could not be parsed."""

    default_message = "failed to parse address"


class LiteUsingNonHostCandidatesError(IceError, ValueError):
    """Non-host candidates were selected for a lite agent."""

    default_message = "lite agents must only use host candidates"


class UselessUrlsProvidedError(IceError, ValueError):
    """URLs were given but no selected candidate type needs them."""

    default_message = "agent does not need URL with selected candidate types"


class UnsupportedNAT1To1IPCandidateTypeError(IceError, ValueError):
    """The requested 1:1 NAT IP candidate type is not supported."""

    default_message = "unsupported 1:1 NAT IP candidate type"


class InvalidNAT1To1IPMappingError(IceError, ValueError):
    """The given 1:1 NAT IP mapping is invalid."""

    default_message = "invalid 1:1 NAT IP mapping"


class ExternalMappedIPNotFoundError(IceError, LookupError):
    """No external IP is mapped for a local IP."""

    default_message = "external mapped IP not found"


class MulticastDNSWithNAT1To1IPMappingError(IceError, ValueError):
    """mDNS gathering was combined with 1:1 NAT mapping for host candidates."""

    default_message = (
        "mDNS gathering cannot be used with 1:1 NAT IP mapping for host candidate"
    )


class IneffectiveNAT1To1IPMappingHostError(IceError, ValueError):
    """1:1 NAT mapping for host candidates was requested with host candidates disabled."""

    default_message = "1:1 NAT IP mapping for host candidate ineffective"


class IneffectiveNAT1To1IPMappingSrflxError(IceError, ValueError):
    """1:1 NAT mapping for srflx candidates was requested with srflx candidates disabled."""

    default_message = "1:1 NAT IP mapping for srflx candidate ineffective"


class InvalidMulticastDNSHostNameError(IceError, ValueError):
    """The mDNS host name is not a single label ending in .local."""

    default_message = (
        "invalid mDNS HostName, must end with .local and can only contain a single '.'"
    )


class RunCanceledError(IceError):
    """A run operation was canceled by its own done signal."""

    default_message = "run was canceled by done"


class TCPRemoteAddrAlreadyExistsError(IceError):
    """A connection with the same remote address already exists."""

    default_message = "conn with same remote addr already exists"


class UnknownCandidateTypeError(IceError, ValueError):
    """A candidate had an unknown type value."""

    default_message = "unknown candidate typ"


class DetermineNetworkTypeError(IceError, ValueError):
    """The network type could not be determined."""

    default_message = "unable to determine networkType"


class UnknownRoleError(IceError, ValueError):
    """A role name could not be parsed."""

    default_message = "unknown role"


class InvalidAddressError(IceError, ValueError):
    """An address was not of the expected kind."""

    default_message = "invalid address"