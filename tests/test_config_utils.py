import pytest

from gltf_unlit.config_utils import UnlitConfig, check_lighten, load_config


def test_missing_file_gives_defaults(tmp_path):
    assert load_config(tmp_path / "nope.yml") == UnlitConfig()


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "unlit.yml"
    path.write_text("")
    assert load_config(path) == UnlitConfig()


def test_values_are_read(tmp_path):
    path = tmp_path / "unlit.yml"
    path.write_text(
        "generator:\n"
        "  binary: /opt/bin/baker\n"
        "  lighten: 0.4\n"
        "output:\n"
        "  indent: 2\n"
        "  dedupe_extensions: true\n"
    )
    assert load_config(path) == UnlitConfig(
        generator_binary="/opt/bin/baker", lighten=0.4, indent=2, dedupe_extensions=True,
    )


def test_repo_config_loads():
    config = load_config()
    assert config.generator_binary == "gltf_unlit_generator"
    assert config.dedupe_extensions is False


def test_non_mapping_root_is_rejected(tmp_path):
    path = tmp_path / "unlit.yml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_out_of_range_lighten_is_rejected(tmp_path):
    path = tmp_path / "unlit.yml"
    path.write_text("generator:\n  lighten: 1.5\n")
    with pytest.raises(ValueError, match="lighten"):
        load_config(path)


@pytest.mark.parametrize("value", [0, 0.0, 0.5, 1, 1.0])
def test_check_lighten_bounds(value):
    assert check_lighten(value) == float(value)


def test_check_lighten_none():
    assert check_lighten(None) is None


@pytest.mark.parametrize("value", [-0.1, 1.01])
def test_check_lighten_out_of_range(value):
    with pytest.raises(ValueError):
        check_lighten(value)


def test_null_binary_falls_back_to_default(tmp_path):
    path = tmp_path / "unlit.yml"
    path.write_text("generator:\n  binary: null\n")
    assert load_config(path).generator_binary == "gltf_unlit_generator"
