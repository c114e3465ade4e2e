"""Models for the operator.openshift.io/v1alpha1 API: the CertManager resource, conditions and feature gates."""

__version__ = "0.1.0"