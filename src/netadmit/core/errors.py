class NetadmitError(Exception):
    """Base error for netadmit exceptions."""


class SpecLoadError(NetadmitError):
    """Raised when a workload manifest cannot be turned into a spec."""


class RegistryError(NetadmitError):
    """Raised when a check registry is misconfigured."""
