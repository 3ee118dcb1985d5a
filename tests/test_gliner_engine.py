import sys
import types

import pytest

from gliner_api.extraction import InitError, ModelInput
from gliner_api.extraction.ner import GlinerEngine, load_gliner_engine


class FakeGliner:
    def __init__(self):
        self.calls = []

    def predict_entities(self, text, labels, threshold=0.5):
        self.calls.append((text, labels, threshold))
        if "John Doe" not in text:
            return []
        start = text.index("John Doe")
        return [
            {
                "start": start,
                "end": start + len("John Doe"),
                "text": "John Doe",
                "label": "person",
                "score": 0.95,
            }
        ]


def test_gliner_engine_maps_predictions_per_sequence():
    model = FakeGliner()
    engine = GlinerEngine(model, threshold=0.4)

    raw = engine.inference(
        ModelInput(texts=("nobody here", "My name is John Doe"), labels=("person", "email"))
    )

    assert raw.spans[0] == ()
    span = raw.spans[1][0]
    assert (span.text, span.label, span.sequence, span.probability) == (
        "John Doe",
        "person",
        1,
        0.95,
    )
    assert model.calls[0] == ("nobody here", ["person", "email"], 0.4)


def test_load_gliner_engine_requires_artifacts(tmp_path):
    with pytest.raises(InitError) as excinfo:
        load_gliner_engine(
            tokenizer_path=tmp_path / "tokenizer.json",
            model_path=tmp_path / "model.onnx",
        )

    assert "tokenizer.json" in str(excinfo.value)


def test_load_gliner_engine_requires_shared_directory(tmp_path):
    (tmp_path / "a").mkdir()
    (tmp_path / "b").mkdir()
    tokenizer = tmp_path / "a" / "tokenizer.json"
    model = tmp_path / "b" / "model.onnx"
    tokenizer.write_text("{}", encoding="utf-8")
    model.write_bytes(b"onnx")
    (tmp_path / "b" / "gliner_config.json").write_text("{}", encoding="utf-8")

    with pytest.raises(InitError):
        load_gliner_engine(tokenizer_path=tokenizer, model_path=model)


def _write_export(directory, *, with_config=True):
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "tokenizer.json").write_text("{}", encoding="utf-8")
    (directory / "model.onnx").write_bytes(b"onnx")
    if with_config:
        (directory / "gliner_config.json").write_text("{}", encoding="utf-8")
    return directory / "tokenizer.json", directory / "model.onnx"


def _install_fake_gliner(monkeypatch):
    captured = {}

    class FakeGLiNER:
        @classmethod
        def from_pretrained(
            cls,
            model_id,
            *,
            load_onnx_model=False,
            onnx_model_file="model.onnx",
            local_files_only=False,
            **model_kwargs,
        ):
            captured.update(
                model_id=model_id,
                load_onnx_model=load_onnx_model,
                onnx_model_file=onnx_model_file,
                local_files_only=local_files_only,
                extra=model_kwargs,
            )
            return FakeGliner()

    module = types.ModuleType("gliner")
    module.GLiNER = FakeGLiNER
    monkeypatch.setitem(sys.modules, "gliner", module)
    return captured


def test_load_gliner_engine_requires_gliner_config(tmp_path):
    tokenizer, model = _write_export(tmp_path / "acme", with_config=False)

    with pytest.raises(InitError) as excinfo:
        load_gliner_engine(tokenizer_path=tokenizer, model_path=model)

    assert "gliner_config.json" in str(excinfo.value)


def test_load_gliner_engine_loads_local_onnx_export(monkeypatch, tmp_path):
    captured = _install_fake_gliner(monkeypatch)
    tokenizer, model = _write_export(tmp_path / "onnx-community" / "pii")

    engine = load_gliner_engine(tokenizer_path=tokenizer, model_path=model, threshold=0.3)

    assert captured["model_id"] == str(model.parent)
    assert captured["load_onnx_model"] is True
    assert captured["onnx_model_file"] == model.name
    assert captured["local_files_only"] is True
    assert captured["extra"] == {}
    raw = engine.inference(ModelInput(texts=("My name is John Doe",), labels=("person",)))
    assert raw.spans[0][0].text == "John Doe"


def test_load_gliner_engine_forwards_extra_options(monkeypatch, tmp_path):
    captured = _install_fake_gliner(monkeypatch)
    tokenizer, model = _write_export(tmp_path / "model")

    load_gliner_engine(tokenizer_path=tokenizer, model_path=model, map_location="cpu")

    assert captured["extra"] == {"map_location": "cpu"}
