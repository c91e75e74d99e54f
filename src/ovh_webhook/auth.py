"""Kubernetes API client construction."""

from __future__ import annotations

import logging

from kubernetes import client, config
from kubernetes.config.config_exception import ConfigException

logger = logging.getLogger(__name__)


def get_core_api(kube_config: client.Configuration | None = None) -> client.CoreV1Api:
    """Return a CoreV1Api for reading Secrets.

    Uses ``kube_config`` when given; otherwise the in-cluster service account,
    falling back to the local kubeconfig when not running in a pod.
    """
    if kube_config is not None:
        return client.CoreV1Api(client.ApiClient(kube_config))

    try:
        config.load_incluster_config()
        logger.info("Loaded in-cluster Kubernetes configuration")
    except ConfigException:
        config.load_kube_config()
        logger.info("Loaded Kubernetes configuration from kubeconfig")
    return client.CoreV1Api()
