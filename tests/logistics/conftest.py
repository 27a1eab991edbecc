import pytest
from logistics.credentials import Credentials
from logistics.security.checkmac import CheckMacEncoder

MERCHANT_ID = "2000132"
HASH_KEY = "5294y06JbISpM5x9"
HASH_IV = "v77hoKGq4kWxNNIS"


@pytest.fixture()
def credentials():
    return Credentials(MERCHANT_ID, HASH_KEY, HASH_IV)


@pytest.fixture()
def encoder():
    return CheckMacEncoder(HASH_KEY, HASH_IV)
