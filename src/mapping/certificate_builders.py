"""Helpers shared by the certificate row mappers."""

from __future__ import annotations

from typing import Any, Callable

from core.certificate_types import Certificate

CertificateBuilder = Callable[[Any], Certificate]


def bare_certificate(certificate_class: type) -> CertificateBuilder:
    """Return a builder for a certificate kind that carries no data.

    Args:
        certificate_class: Dataclass of the certificate kind.

    Returns:
        Builder ignoring the row beyond its type code.
    """

    def build(row: Any) -> Certificate:
        return certificate_class()

    return build
