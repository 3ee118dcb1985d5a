import json

from gliner_api import cli
from gliner_api.extraction import EntitySpan, RawOutput
from gliner_api.services.detection import DetectionConfig


class StubEngine:
    def inference(self, model_input):
        return RawOutput(spans=((EntitySpan("John Doe", "person", 0, 0.95),),))


def test_parse_args_serve_options():
    args = cli.parse_args(["--log-level", "debug", "serve", "--port", "9000"])

    assert args.command == "serve"
    assert args.port == 9000
    assert args.host is None
    assert args.log_level == "debug"


def test_detect_reports_missing_model(monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("GLINER_MODELS_DIR", str(tmp_path))
    monkeypatch.delenv("GLINER_ENGINE_FACTORY", raising=False)

    exit_code = cli.main(["detect", "My name is John Doe"])

    assert exit_code == 1
    output = json.loads(capsys.readouterr().out)
    assert output["success"] is False
    assert "model not loaded" in output["message"].lower()


def test_detect_prints_success_envelope(monkeypatch, capsys):
    config = DetectionConfig(engine=StubEngine())
    monkeypatch.setattr(DetectionConfig, "from_env", classmethod(lambda cls: config))

    exit_code = cli.main(["detect", "My name is John Doe"])

    assert exit_code == 0
    output = json.loads(capsys.readouterr().out)
    assert output["success"] is True
    assert output["data"]["total_entities"] == 1
    assert output["data"]["entities"][0]["text"] == "John Doe"


def test_paths_lists_artifacts(monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("GLINER_MODELS_DIR", str(tmp_path))
    monkeypatch.setenv("GLINER_MODEL", "acme/pii")

    exit_code = cli.main(["paths"])

    assert exit_code == 0
    output = capsys.readouterr().out
    assert "tokenizer" in output
    assert "config" in output
    assert "acme/pii" in output


def test_serve_delegates_to_uvicorn_runner(monkeypatch):
    calls = []
    monkeypatch.setattr(cli, "run_api", lambda host=None, port=None: calls.append((host, port)))

    exit_code = cli.main(["serve", "--host", "127.0.0.1", "--port", "8123"])

    assert exit_code == 0
    assert calls == [("127.0.0.1", 8123)]
