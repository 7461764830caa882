import os
from types import SimpleNamespace

os.environ.setdefault("LOG_DIR", os.path.join(os.path.dirname(os.path.abspath(__file__)), "_logs"))

from techmeme_digest import catalog
from techmeme_digest.llm.registry import list_models
from techmeme_digest.models import ModelInfo


def _raw_model(name, actions, display=None):
    return SimpleNamespace(
        name=name,
        display_name=display,
        description="desc",
        supported_actions=actions,
        input_token_limit=1048576,
        output_token_limit=None,
    )


class DummyModels:
    def __init__(self, models=None, exc=None):
        self.models = models or []
        self.exc = exc

    def list(self):
        if self.exc:
            raise self.exc
        return iter(self.models)


def test_list_models_maps_catalog_entries():
    client = SimpleNamespace(models=DummyModels([
        _raw_model("models/gemini-pro-latest", ["generateContent", "countTokens"], "Gemini Pro"),
        _raw_model("models/embedding-001", None),
    ]))
    models = list_models(client)
    assert [m.name for m in models] == ["models/gemini-pro-latest", "models/embedding-001"]
    assert models[0].display_name == "Gemini Pro"
    assert models[1].supported_actions == []


def test_format_catalog_lists_generators():
    models = [
        ModelInfo(name="models/a", display_name="A", supported_actions=["generateContent"],
                  input_token_limit=1048576),
        ModelInfo(name="models/b", supported_actions=["embedContent"]),
    ]
    out = catalog.format_catalog(models)
    assert "FOUND 2 MODELS" in out
    assert "Input Token Limit: 1,048,576" in out
    assert "Output Token Limit: N/A" in out
    assert "1 support generateContent" in out
    assert "   1. models/a" in out


def test_format_catalog_without_generators():
    out = catalog.format_catalog([ModelInfo(name="models/b", supported_actions=["embedContent"])])
    assert "No models found with generateContent support" in out


def test_main_requires_api_key(monkeypatch):
    monkeypatch.setattr(catalog, "load_dotenv", lambda: False)
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    assert catalog.main() == 1


def test_main_prints_catalog(monkeypatch, capsys):
    monkeypatch.setattr(catalog, "load_dotenv", lambda: False)
    monkeypatch.setenv("GEMINI_API_KEY", "k")
    client = SimpleNamespace(models=DummyModels([_raw_model("models/x", ["generateContent"])]))
    monkeypatch.setattr(catalog, "build_client", lambda key: client)
    assert catalog.main() == 0
    assert "models/x" in capsys.readouterr().out


def test_main_reports_listing_failure(monkeypatch):
    monkeypatch.setattr(catalog, "load_dotenv", lambda: False)
    monkeypatch.setenv("GEMINI_API_KEY", "k")
    client = SimpleNamespace(models=DummyModels(exc=RuntimeError("403")))
    monkeypatch.setattr(catalog, "build_client", lambda key: client)
    assert catalog.main() == 1
