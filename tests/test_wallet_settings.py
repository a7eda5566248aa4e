import json
from pathlib import Path

import pytest
from solders.pubkey import Pubkey

from cre_setup.constants import DEFAULT_RPC_URL, DEFAULT_WALLET_PATH
from cre_setup.errors import CredentialNotFound, MissingSetting, SetupError
from cre_setup.settings import Settings
from cre_setup.wallet import load_keypair


def test_load_keypair(wallet_file, keypair) -> None:
    assert load_keypair(wallet_file).pubkey() == keypair.pubkey()


def test_missing_keypair_names_path_and_keygen(tmp_path) -> None:
    missing = tmp_path / "nope.json"
    with pytest.raises(CredentialNotFound) as exc:
        load_keypair(missing)
    assert str(missing) in str(exc.value)
    assert "solana-keygen new" in exc.value.hint


def test_malformed_keypair(tmp_path) -> None:
    bad = tmp_path / "id.json"
    bad.write_text(json.dumps({"secret": "x"}))
    with pytest.raises(SetupError):
        load_keypair(bad)


def test_settings_defaults(tmp_path) -> None:
    settings = Settings.load(root=tmp_path, environ={})
    assert settings.rpc_url == DEFAULT_RPC_URL
    assert settings.wallet_path == DEFAULT_WALLET_PATH
    assert settings.program_id is None
    assert settings.idl_path == tmp_path / "target" / "idl" / "loan_core.json"


def test_settings_read_api_env_and_environment_wins(tmp_path) -> None:
    program_id = Pubkey.new_unique()
    (tmp_path / "api").mkdir()
    (tmp_path / "api" / ".env").write_text(
        f"LOAN_CORE_PROGRAM_ID={program_id}\n"
        "USDC_MINT=from-file\n"
        "SOLANA_RPC_URL=http://file:8899\n"
    )
    settings = Settings.load(
        root=tmp_path,
        environ={"SOLANA_RPC_URL": "http://env:8899", "SOLANA_WALLET": "/keys/admin.json"},
    )
    assert settings.require_program_id() == program_id
    assert settings.usdc_mint == "from-file"
    assert settings.rpc_url == "http://env:8899"
    assert settings.wallet_path == Path("/keys/admin.json")


def test_require_rejects_missing_and_invalid(tmp_path) -> None:
    settings = Settings(root=tmp_path, usdc_mint="not-a-pubkey")
    with pytest.raises(MissingSetting, match="LOAN_CORE_PROGRAM_ID"):
        settings.require_program_id()
    with pytest.raises(MissingSetting, match="not a valid address"):
        settings.require_usdc_mint()


def test_json_object_keypair_is_rejected(tmp_path) -> None:
    bad = tmp_path / "id.json"
    bad.write_text(json.dumps({"0": 1, "1": 2}))
    with pytest.raises(SetupError, match="JSON array"):
        load_keypair(bad)


def test_directory_at_wallet_path(tmp_path) -> None:
    wallet_dir = tmp_path / "id.json"
    wallet_dir.mkdir()
    with pytest.raises(SetupError, match="not a valid key file"):
        load_keypair(wallet_dir)
