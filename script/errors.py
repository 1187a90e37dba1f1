"""Exceptions raised while configuring and deploying FundMe."""


class FundMeDeploymentError(Exception):
    """Base exception for configuration and deployment failures."""

    pass


class ConfigurationError(FundMeDeploymentError, LookupError):
    """Raised when a network has no usable price feed entry."""

    pass


class DeploymentError(FundMeDeploymentError, RuntimeError):
    """Raised when the FundMe deployment is rejected."""

    pass
