import hypothesis
import pytest

from znn_abi.primitives import Address, Hash, TokenStandard

############
# PATCHING #
############


# disable hypothesis deadline globally
hypothesis.settings.register_profile("ci", deadline=None)
hypothesis.settings.load_profile("ci")


def pytest_configure(config):
    config.addinivalue_line("markers", "fuzzing: hypothesis driven tests")


@pytest.fixture
def user_address():
    return Address.parse("z1qqjnwjjpnue8xmmpanz6csze6tcmtzzdtfsww7")


@pytest.fixture
def pillar_contract():
    return Address.parse("z1qxemdeddedxpyllarxxxxxxxxxxxxxxxsy3fmg")


@pytest.fixture
def znn_token_standard():
    return TokenStandard.parse("zts1znnxxxxxxxxxxxxx9z4ulx")


@pytest.fixture
def some_hash():
    return Hash(bytes(range(32)))


@pytest.fixture
def word():
    # a 32-byte word from a hex string, left-padded with zeroes
    def fn(hex_str):
        return bytes.fromhex(hex_str.rjust(64, "0"))

    return fn

