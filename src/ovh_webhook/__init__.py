"""cert-manager DNS-01 webhook solver for OVH DNS zones."""

from ovh_webhook.solver import OvhDnsSolver

__all__ = ["OvhDnsSolver"]
__version__ = "0.1.0"
