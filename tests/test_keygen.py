from fieldcrypt.config import CryptConfig
from fieldcrypt import keygen


def test_generated_secrets_are_valid():
    values = keygen.generate_secrets()
    config = CryptConfig.from_env(values)
    assert len(config.master_key) == 32
    assert config.pii_active == 2
    assert config.salt_round == 10


def test_generated_secrets_are_random():
    assert keygen.generate_secrets()["MASTER_KEY"] != keygen.generate_secrets()["MASTER_KEY"]


def test_main_prints_env_lines(capsys):
    keygen.main()
    lines = capsys.readouterr().out.splitlines()
    assert [line.split("=", 1)[0] for line in lines] == [
        "MASTER_KEY",
        "DERIVE_KEY",
        "PII_SECRET",
        "HMAC_SECRET",
        "PII_ACTIVE",
        "SALT_ROUND",
    ]
