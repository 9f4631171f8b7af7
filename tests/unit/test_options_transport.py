"""Tests for options fingerprints and worker hand-off."""

from __future__ import annotations

import pytest

from checker_options import (
    FormatOptions,
    Options,
    OptionsTransportError,
    PatternRule,
    build_options,
    decode_options,
    default_options,
    encode_options,
    with_overrides,
)
from checker_options.transport import OptionsEnvelope
from core.config_base import FingerprintableConfig, config_fingerprint
from serde_msgspec import dumps_msgpack


def _sample_options() -> Options:
    return build_options(
        {
            "module": "haste",
            "component_syntax_includes": ["packages/ui/"],
            "module_name_mappers": [["^b", "B"], ["^a", "A"]],
            "enabled_rollouts": {"z": "1", "a": "2"},
            "suppress_types": ["$B", "$A"],
            "jsx": {"kind": "pragma", "pragma": "h"},
            "log_saving": {"check": {"threshold_time_ms": 100}},
        }
    )


def test_fingerprint_is_stable_for_equal_records() -> None:
    """Equal records built separately share a fingerprint."""
    assert _sample_options().fingerprint() == _sample_options().fingerprint()
    assert default_options().fingerprint() == default_options().fingerprint()


def test_fingerprint_ignores_mapping_insertion_order() -> None:
    """Mapping key order does not affect the fingerprint."""
    first = default_options(enabled_rollouts={"a": "1", "b": "2"})
    second = default_options(enabled_rollouts={"b": "2", "a": "1"})
    assert first.fingerprint() == second.fingerprint()


def test_fingerprint_tracks_pattern_order() -> None:
    """Reordering a pattern list changes the fingerprint."""
    first = default_options(
        module_name_mappers=(
            PatternRule(pattern="^a", replacement="A"),
            PatternRule(pattern="^b", replacement="B"),
        )
    )
    second = default_options(module_name_mappers=tuple(reversed(first.module_name_mappers)))
    assert first.fingerprint() != second.fingerprint()


def test_fingerprint_tracks_nested_values() -> None:
    """A change deep in a nested record changes the fingerprint."""
    base = default_options()
    changed = with_overrides(base, format=FormatOptions(single_quotes=True))
    assert base.fingerprint() != changed.fingerprint()


def test_encode_decode_reconstructs_identical_record() -> None:
    """Workers rebuild a record equal to the server's."""
    opts = _sample_options()
    decoded = decode_options(encode_options(opts), expected_fingerprint=opts.fingerprint())
    assert decoded == opts
    assert decoded.fingerprint() == opts.fingerprint()
    assert decoded.module_name_mappers == opts.module_name_mappers


def test_decode_rejects_unexpected_fingerprint() -> None:
    """A worker expecting other options refuses the payload."""
    payload = encode_options(_sample_options())
    with pytest.raises(OptionsTransportError, match="does not match expected"):
        decode_options(payload, expected_fingerprint=default_options().fingerprint())


def test_decode_rejects_tampered_envelope() -> None:
    """An envelope whose fingerprint disagrees with its options is refused."""
    payload = dumps_msgpack(OptionsEnvelope(fingerprint="0" * 64, options=default_options()))
    with pytest.raises(OptionsTransportError, match="mismatch"):
        decode_options(payload)


def test_decode_rejects_garbage() -> None:
    """Undecodable payloads raise a transport error."""
    with pytest.raises(OptionsTransportError, match="Undecodable"):
        decode_options(b"\xc1not-msgpack")


def test_fingerprint_ignores_set_order() -> None:
    """Set-valued fields hash the same regardless of construction order."""
    first = default_options(suppress_types=frozenset(["$A", "$B", "$C"]))
    second = default_options(suppress_types=frozenset(["$C", "$B", "$A"]))
    assert first.fingerprint() == second.fingerprint()
    assert first.fingerprint_payload()["options"]["suppress_types"] == ["$A", "$B", "$C"]


def test_options_satisfy_fingerprintable_protocol() -> None:
    """The options record exposes the shared fingerprint protocol."""
    opts = default_options()
    assert isinstance(opts, FingerprintableConfig)
    assert opts.fingerprint() == config_fingerprint(opts.fingerprint_payload())
