"""Shared test fixtures and configuration."""

import logging
import os
from pathlib import Path

from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
import pytest

from little_search.observability import tracing as tracing_module


NOISE_WORDS = ["the", "is", "a", "and", "of", "on"]

# document name -> text
SAMPLE_CORPUS = {
    "cats.txt": "The cat sat on the mat. Cat! cat, dog.",
    "dogs.txt": "A dog is a dog; the dog barked at a cat.",
    "birds.txt": "Birds sing. Dogs bark? 42 birds and 3cats.",
}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Keep LITTLE_SEARCH_* variables and stray .env files out of every test."""
    for key in list(os.environ):
        if key.upper().startswith("LITTLE_SEARCH_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo configure_logging() calls made by a test."""
    root = logging.getLogger()
    level = root.level
    yield
    # pytest's capture handlers are subclasses; only plain stream handlers come from configure_logging().
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def span_exporter(monkeypatch):
    """Route spans to an in-memory exporter for the duration of a test."""
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    monkeypatch.setitem(tracing_module._tracer_holder, "tracer", provider.get_tracer("tests"))
    return exporter


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    """Write the sample corpus plus docs and noise-word lists to disk."""
    root = tmp_path / "corpus"
    root.mkdir()
    for name, text in SAMPLE_CORPUS.items():
        (root / name).write_text(text, encoding="utf-8")
    (root / "docs.txt").write_text("\n".join(SAMPLE_CORPUS) + "\n", encoding="utf-8")
    (root / "noisewords.txt").write_text("\n".join(NOISE_WORDS) + "\n", encoding="utf-8")
    return root
