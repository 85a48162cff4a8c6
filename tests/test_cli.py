import json

import pytest

from bech32codec.cli.main import cli
from .unit.util.vectors import SEGWIT_V0

pytestmark = pytest.mark.cli


def test_encode(runner):
    result = runner.invoke(cli, ["encode", "a", "", "--variant", "bech32"])
    assert result.exit_code == 0, result.output
    assert result.output == "a12uel5l\n"


def test_encode_upper(runner):
    result = runner.invoke(cli, ["encode", "a", "", "--variant", "bech32m", "--upper"])
    assert result.exit_code == 0, result.output
    assert result.output == "A1LQFN3A\n"


def test_encode_requires_variant(runner):
    result = runner.invoke(cli, ["encode", "a", "00"])
    assert result.exit_code == 2
    assert "--variant" in result.output


def test_encode_rejects_bad_hex(runner):
    result = runner.invoke(cli, ["encode", "a", "zz", "--variant", "bech32"])
    assert result.exit_code == 2
    assert "not a hex string" in result.output


def test_encode_reports_codec_error(runner):
    result = runner.invoke(cli, ["encode", "\u00e9", "00", "--variant", "bech32"])
    assert result.exit_code == 1
    assert "Error (invalid_character)" in result.output


def test_decode_json(runner):
    result = runner.invoke(cli, ["decode", "A1LQFN3A", "--json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {
        "hrp": "a",
        "data": "",
        "variant": "bech32m",
    }


def test_decode_round_trips_encode(runner):
    encoded = runner.invoke(cli, ["encode", "bc", "deadbeef", "--variant", "bech32m"])
    result = runner.invoke(cli, ["decode", encoded.output.strip(), "--json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["data"] == "deadbeef"


def test_decode_table(runner):
    result = runner.invoke(cli, ["decode", "a12uel5l"])
    assert result.exit_code == 0, result.output
    assert "hrp" in result.output
    assert "(empty)" in result.output
    assert "bech32" in result.output


def test_decode_constrained_variant(runner):
    result = runner.invoke(cli, ["decode", "A1LQFN3A", "--variant", "bech32"])
    assert result.exit_code == 1
    assert "Error (wrong_variant)" in result.output


def test_decode_max_length(runner):
    result = runner.invoke(cli, ["decode", "a12uel5l", "--max-length", "5"])
    assert result.exit_code == 1
    assert "limit is 5" in result.output


def test_decode_reports_no_separator(runner):
    result = runner.invoke(cli, ["decode", "pzry9x0s0muk"])
    assert result.exit_code == 1
    assert "Error (no_separator)" in result.output


def test_verify_segwit_address(runner):
    result = runner.invoke(cli, ["verify", SEGWIT_V0])
    assert result.exit_code == 0, result.output
    assert "valid bech32" in result.output


def test_verify_checksum_mismatch(runner):
    result = runner.invoke(cli, ["verify", "a12uel5m"])
    assert result.exit_code == 1
    assert "Error (checksum_mismatch)" in result.output
