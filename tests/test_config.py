import pytest

from valhalla.config import Config, load_config

SAMPLE = """
[database]
address = "127.0.0.1"
port = "3306"
user = "root"
password = "password"
database = "maplestory"

[login]
clientListenAddress = "0.0.0.0"
clientListenPort = "8484"
withPin = true
packetQueueSize = 512

[world]
message = "welcome"
ribbon = 2
expRate = 1.5
dropRate = 1
loginPort = "8485"

[channel]
worldAddress = "127.0.0.1"
listenPort = "8686"
maxPop = 250
"""


def test_load_sample(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(SAMPLE)
    config = load_config(path)
    assert config.database.address == "127.0.0.1"
    assert config.database.database == "maplestory"
    assert config.login.client_listen_port == "8484"
    assert config.login.with_pin is True
    assert config.login.packet_queue_size == 512
    assert config.world.ribbon == 2
    assert config.world.exp_rate == 1.5
    assert config.world.drop_rate == 1.0
    assert config.channel.max_pop == 250
    assert config.channel.listen_port == "8686"


def test_missing_sections_use_defaults():
    config = Config.from_mapping({})
    assert config == Config()
    assert config.login.latency == 0


def test_unknown_keys_are_ignored():
    config = Config.from_mapping({"Login": {"Unused": 1, "Jitter": 3}})
    assert config.login.jitter == 3


@pytest.mark.parametrize(
    "data",
    [
        {"Database": {"Port": 3306}},
        {"Login": {"WithPin": 1}},
        {"Channel": {"MaxPop": 40000}},
        {"World": {"Ribbon": 256}},
        {"World": {"ExpRate": "fast"}},
        {"Login": "nope"},
    ],
)
def test_bad_values_raise(data):
    with pytest.raises(ValueError):
        Config.from_mapping(data)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.toml")