"""Hand-off of the options record to worker processes.

Workers rebuild the record from a MessagePack payload and compare
fingerprints with the parent, so a worker never runs with options that
differ from the server's.
"""

from __future__ import annotations

import logging

import msgspec

from checker_options.errors import OptionsTransportError
from checker_options.model import Options
from serde_msgspec import dumps_msgpack, loads_msgpack

logger = logging.getLogger(__name__)


class OptionsEnvelope(msgspec.Struct, frozen=True, kw_only=True):
    """Options payload paired with the sender's fingerprint."""

    fingerprint: str
    options: Options


def encode_options(opts: Options) -> bytes:
    """Serialize ``opts`` for a worker process.

    Returns
    -------
    bytes
        MessagePack payload carrying the record and its fingerprint.
    """
    return dumps_msgpack(OptionsEnvelope(fingerprint=opts.fingerprint(), options=opts))


def decode_options(payload: bytes, *, expected_fingerprint: str | None = None) -> Options:
    """Rebuild an options record sent by ``encode_options``.

    Parameters
    ----------
    payload
        MessagePack payload.
    expected_fingerprint
        Fingerprint the caller expects, typically received out of band.

    Returns
    -------
    Options
        Reconstructed record.

    Raises
    ------
    OptionsTransportError
        Raised when the payload cannot be decoded or its fingerprint does not
        match the rebuilt record or the expected value.
    """
    try:
        envelope = loads_msgpack(payload, target_type=OptionsEnvelope)
    except (msgspec.DecodeError, msgspec.ValidationError) as exc:
        msg = f"Undecodable options payload: {exc}"
        raise OptionsTransportError(msg) from exc
    opts = envelope.options
    actual = opts.fingerprint()
    if actual != envelope.fingerprint:
        msg = (
            "Options fingerprint mismatch after decoding: "
            f"sent {envelope.fingerprint}, rebuilt {actual}."
        )
        raise OptionsTransportError(msg)
    if expected_fingerprint is not None and actual != expected_fingerprint:
        msg = f"Options fingerprint {actual} does not match expected {expected_fingerprint}."
        raise OptionsTransportError(msg)
    logger.debug("Decoded options fingerprint=%s", actual)
    return opts


__all__ = ["OptionsEnvelope", "decode_options", "encode_options"]
