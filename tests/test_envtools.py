from fastswim.utils import envtools


def test_example_lists_every_key():
    text = envtools.generate_env_example()
    for values in envtools.ENV_GROUPS.values():
        for key in values:
            assert f'{key}="' in text


def test_write_does_not_overwrite_without_force(tmp_path):
    path = tmp_path / ".env.example"
    path.write_text("garde-moi", encoding="utf-8")

    envtools.write_env_example(str(path))
    assert path.read_text(encoding="utf-8") == "garde-moi"

    envtools.write_env_example(str(path), overwrite=True)
    assert "FASTSWIM_LOCALE" in path.read_text(encoding="utf-8")


def test_check_env_reports_bad_values(monkeypatch):
    for values in envtools.ENV_GROUPS.values():
        for key in values:
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("FASTSWIM_TODAY", "2024-13-01")
    monkeypatch.setenv("FASTSWIM_CELL_PREVIEW", "deux")
    monkeypatch.setenv("FASTSWIM_MOCK_LATENCY", "0.2")

    status, errors = envtools.check_env()

    assert set(errors) == {"FASTSWIM_TODAY", "FASTSWIM_CELL_PREVIEW"}
    assert status["FASTSWIM_MOCK_LATENCY"] is True
    assert status["FASTSWIM_LOCALE"] is True
