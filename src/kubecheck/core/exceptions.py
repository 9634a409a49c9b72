"""Custom exceptions for kubecheck."""


class KubecheckError(Exception):
    """Base exception for all kubecheck errors."""


class ConfigurationError(KubecheckError):
    """Configuration-related errors."""


class KubernetesError(KubecheckError):
    """Kubernetes operation failed."""


class CommunicationError(KubernetesError):
    """Kubernetes API could not be reached or returned an unusable response."""
