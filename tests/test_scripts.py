from unittest.mock import patch

from scripts import serve


def test_serve_configures_logging_and_runs_uvicorn(monkeypatch):
    monkeypatch.setenv("API_PORT", "9090")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    serve.get_settings.cache_clear()

    with patch.object(serve, "configure_logging") as configure, patch.object(
        serve.uvicorn, "run"
    ) as run:
        serve.main()

    serve.get_settings.cache_clear()
    configure.assert_called_once_with("WARNING")
    run.assert_called_once()
    assert run.call_args.args == ("app:app",)
    assert run.call_args.kwargs["port"] == 9090
