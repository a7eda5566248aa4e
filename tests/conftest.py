import json

import pytest
from solders.keypair import Keypair
from solders.pubkey import Pubkey


@pytest.fixture
def keypair():
    return Keypair()


@pytest.fixture
def wallet_file(tmp_path, keypair):
    path = tmp_path / "id.json"
    path.write_text(json.dumps(list(bytes(keypair))))
    return path


@pytest.fixture
def program_id():
    return Pubkey.new_unique()


@pytest.fixture
def usdc_mint():
    return Pubkey.new_unique()
