"""Tools for kubeadm contributors: a CLI front end, a node entrypoint and header checks."""

__version__ = "0.1.0"