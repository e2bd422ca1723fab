import textwrap
from pathlib import Path

import pytest
from loguru import logger

from javapkg_resolver import ResolveResult


class RecordingOracle:
    """Oracle answering from a fixed set of (package, class) pairs, logging every call"""

    def __init__(self, known=(), paths=None, description="FAKE"):
        self.known = set(known)
        self.paths = dict(paths or {})
        self.description = description
        self.calls = []

    def resolve(self, package_name, class_name):
        self.calls.append((package_name, class_name))
        key = (package_name, class_name)
        if key in self.paths:
            return ResolveResult.found(self.paths[key])
        if key in self.known:
            return ResolveResult.found()
        return ResolveResult.not_found()


@pytest.fixture
def write_java(tmp_path):
    """Write a Java source under tmp_path and return its path"""

    def _write(relative: str, code: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(code), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def log_messages():
    """Capture loguru records as 'LEVEL message' strings"""
    messages = []
    handler_id = logger.add(lambda m: messages.append(f"{m.record['level'].name} {m.record['message']}"), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def no_java_home(monkeypatch):
    """Keep the classpath index to the bundled JDK classes unless a test sets JAVA_HOME"""
    monkeypatch.delenv("JAVA_HOME", raising=False)
