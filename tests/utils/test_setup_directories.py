from pathlib import Path

from grovegrid.schemas import ParamConfig, UserConfig, resolve_config
from grovegrid.setup_directories import get_output_paths, setup_output_directories


def test_setup_output_directories_creates_base(tmp_path):
    dirs = setup_output_directories(tmp_path / "out" / "nested")

    assert set(dirs.keys()) == {"base"}
    assert isinstance(dirs["base"], Path)
    assert dirs["base"].is_dir()


def test_setup_output_directories_is_idempotent(tmp_path):
    assert setup_output_directories(tmp_path) == setup_output_directories(tmp_path)


def test_output_paths_defaults(tmp_path):
    config = resolve_config(ParamConfig(), None, None)
    paths = get_output_paths(config, {"base": tmp_path})

    assert paths == {"document": tmp_path / "index.html", "json": None}


def test_output_paths_json_and_no_document(tmp_path):
    user = UserConfig(JSON_OUT=str(tmp_path / "data.json"), output={"write_document": False})
    config = resolve_config(ParamConfig(), user, None)
    paths = get_output_paths(config, {"base": tmp_path})

    assert paths == {"document": None, "json": tmp_path / "data.json"}
