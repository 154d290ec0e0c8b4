import pytest

from minigrep import Config, ConfigError, MissingFilename, MissingQuery

SET = {"CASE_INSENSITIVE": "1"}
UNSET: dict = {}


@pytest.mark.parametrize("args", [[], ["minigrep"]])
def test_missing_query(args):
    with pytest.raises(MissingQuery) as excinfo:
        Config.from_args(args, environ=UNSET)
    assert str(excinfo.value) == "Didn't get a query string"


def test_missing_filename():
    with pytest.raises(MissingFilename) as excinfo:
        Config.from_args(["minigrep", "rusty"], environ=UNSET)
    assert str(excinfo.value) == "Didn't get a file name"
    assert isinstance(excinfo.value, ConfigError)


def test_query_and_filename_taken_in_order():
    config = Config.from_args(["minigrep", "word", "data.txt"], environ=UNSET)
    assert config == Config(query="word", filename="data.txt", case_sensitive=True)


def test_extra_arguments_are_ignored():
    config = Config.from_args(["minigrep", "word", "data.txt", "extra-arg"], environ=UNSET)
    assert config.query == "word"
    assert config.filename == "data.txt"
    assert config.case_sensitive is True


def test_environment_signal_disables_case_sensitivity():
    config = Config.from_args(["minigrep", "word", "data.txt"], environ=SET)
    assert config.case_sensitive is False


def test_empty_environment_value_still_counts_as_set():
    config = Config.from_args(["minigrep", "word", "data.txt"], environ={"CASE_INSENSITIVE": ""})
    assert config.case_sensitive is False


@pytest.mark.parametrize(
    "trailing",
    [["--any"], ["bad-arg", "--any"], ["--any", "more", "--any"]],
)
@pytest.mark.parametrize("environ", [SET, UNSET])
def test_any_flag_forces_case_insensitive(trailing, environ):
    config = Config.from_args(["minigrep", "word", "data.txt", *trailing], environ=environ)
    assert config == Config(query="word", filename="data.txt", case_sensitive=False)


def test_any_flag_in_query_position_is_a_query():
    config = Config.from_args(["minigrep", "--any", "data.txt"], environ=UNSET)
    assert config.query == "--any"
    assert config.case_sensitive is True


def test_accepts_any_iterable():
    config = Config.from_args(iter(["prog", "q", "f"]), environ=UNSET)
    assert (config.query, config.filename) == ("q", "f")


def test_reads_process_environment_by_default(monkeypatch):
    monkeypatch.setenv("CASE_INSENSITIVE", "yes")
    assert Config.from_args(["minigrep", "q", "f"]).case_sensitive is False
    monkeypatch.delenv("CASE_INSENSITIVE")
    assert Config.from_args(["minigrep", "q", "f"]).case_sensitive is True


def test_config_is_immutable():
    config = Config.from_args(["minigrep", "q", "f"], environ=UNSET)
    with pytest.raises(AttributeError):
        config.query = "other"
