from click.testing import CliRunner

from hdkeys.cli import main

SEED = "000102030405060708090a0b0c0d0e0f"
XPRV_M = (
    "xprv9s21ZrQH143K3QTDL4LXw2F7HEK3wJUD2nW2nRk4stbPy6cq3jPPqjiChkVv"
    "vNKmPGJxWUtg6LnF5kejMRNNU3TGtRBeJgk33yuGBxrMPHi"
)
XPUB_M = (
    "xpub661MyMwAqRbcFtXgS5sYJABqqG9YLmC4Q1Rdap9gSE8NqtwybGhePY2gZ29E"
    "SFjqJoCu1Rupje8YtGqsefD265TMg7usUDFdp6W1EGMcet8"
)
XPRV_0H_1 = (
    "xprv9wTYmMFdV23N2TdNG573QoEsfRrWKQgWeibmLntzniatZvR9BmLnvSxqu53K"
    "w1UmYPxLgboyZQaXwTCg8MSY3H2EU4pWcQDnRnrVA1xe8fs"
)
XPUB_0H_1 = (
    "xpub6ASuArnXKPbfEwhqN6e3mwBcDTgzisQN1wXN9BJcM47sSikHjJf3UFHKkNAW"
    "bWMiGj7Wf5uMash7SyYq527Hqck2AxYysAA7xmALppuCkwQ"
)


def run(*args, **kwargs):
    return CliRunner().invoke(main, list(args), **kwargs)


def test_master():
    result = run("master", SEED)
    assert result.exit_code == 0
    assert result.output.strip() == XPRV_M


def test_master_public():
    result = run("master", "--public", SEED)
    assert result.output.strip() == XPUB_M


def test_master_testnet_from_env():
    result = run("master", SEED, env={"HDKEYS_NETWORK": "testnet"})
    assert result.exit_code == 0
    assert result.output.startswith("tprv")


def test_master_invalid_hex():
    result = run("master", "xyz")
    assert result.exit_code == 1


def test_derive():
    result = run("derive", XPRV_M, "m/0'/1")
    assert result.exit_code == 0
    assert result.output.strip() == XPRV_0H_1

    result = run("derive", "--public", XPRV_M, "m/0'/1")
    assert result.output.strip() == XPUB_0H_1


def test_derive_hardened_from_public():
    result = run("derive", XPUB_M, "m/0'")
    assert result.exit_code == 1
    assert "private key" in result.output


def test_derive_bad_path():
    result = run("derive", XPRV_M, "0/1")
    assert result.exit_code == 1


def test_invalid_xkey():
    result = run("neuter", XPRV_M[:-1] + "j")
    assert result.exit_code == 2


def test_neuter():
    result = run("neuter", XPRV_M)
    assert result.output.strip() == XPUB_M


def test_show():
    result = run("show", XPUB_0H_1)
    assert result.exit_code == 0
    assert "Network: mainnet (public)" in result.output
    assert "Depth: 2" in result.output
    assert "Parent fingerprint: 5c1bd648" in result.output
    assert "Child number: 1\n" in result.output
