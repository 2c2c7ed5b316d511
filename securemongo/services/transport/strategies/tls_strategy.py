"""TLS over TCP transport built from a caller-supplied TLSConfig."""

import socket
import ssl
from typing import Any

import certifi

from securemongo.config.storage.models import TLSConfig
from securemongo.services.transport.base import BaseTransportOpener, ServerAddress


def resolve_ca_file(config: TLSConfig) -> str:
    """CA bundle to trust: the configured file, else the certifi bundle."""
    return config.ca_file or certifi.where()


def build_ssl_context(config: TLSConfig) -> ssl.SSLContext:
    """Build a client-side SSLContext equivalent to the driver options from the same config."""
    context = ssl.create_default_context(cafile=resolve_ca_file(config))
    if config.certificate_key_file:
        context.load_cert_chain(
            config.certificate_key_file,
            password=config.certificate_key_file_password,
        )
    if config.crl_file:
        context.load_verify_locations(cafile=config.crl_file)
        context.verify_flags |= ssl.VERIFY_CRL_CHECK_LEAF
    if config.allow_invalid_hostnames or config.allow_invalid_certificates:
        context.check_hostname = False
    if config.allow_invalid_certificates:
        context.verify_mode = ssl.CERT_NONE
    return context


class TLSTransportOpener(BaseTransportOpener):
    """
    TLS-wrapped TCP connections. The config is only read, so one TLSConfig can
    back any number of concurrent dials.
    """

    def __init__(self, tls_config: TLSConfig):
        self.tls_config = tls_config

    @property
    def transport_name(self) -> str:
        return "tls"

    def open(self, address: ServerAddress, timeout: float) -> socket.socket:
        host, port = address
        context = build_ssl_context(self.tls_config)
        sock = socket.create_connection((host, port), timeout=timeout)
        try:
            return context.wrap_socket(sock, server_hostname=host)
        except OSError:
            sock.close()
            raise

    def client_options(self) -> dict[str, Any]:
        cfg = self.tls_config
        opts: dict[str, Any] = {"tls": True, "tlsCAFile": resolve_ca_file(cfg)}
        if cfg.certificate_key_file:
            opts["tlsCertificateKeyFile"] = cfg.certificate_key_file
            if cfg.certificate_key_file_password:
                opts["tlsCertificateKeyFilePassword"] = cfg.certificate_key_file_password
        if cfg.crl_file:
            opts["tlsCRLFile"] = cfg.crl_file
        if cfg.allow_invalid_certificates:
            opts["tlsAllowInvalidCertificates"] = True
        elif cfg.disable_ocsp_endpoint_check:
            # pymongo rejects both together; invalid certificates already skip OCSP
            opts["tlsDisableOCSPEndpointCheck"] = True
        if cfg.allow_invalid_hostnames:
            opts["tlsAllowInvalidHostnames"] = True
        return opts
