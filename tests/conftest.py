import pytest

from tern.evaluation.evaluator import evaluate
from tern.reader.lexer import Lexer
from tern.reader.parser import Parser
from tern.types.environment import Environment


def _parse(source):
    parser = Parser(Lexer(source))
    program = parser.parse_program()
    assert parser.errors == [], f"parser errors for {source!r}: {parser.errors}"
    return program


@pytest.fixture
def parse():
    """Parse source text, failing the test on any parser error."""
    return _parse


@pytest.fixture
def env():
    """Fresh global environment for each test."""
    return Environment()


@pytest.fixture
def run(env):
    """Parse and evaluate source text against the test's environment."""
    def _run(source):
        return evaluate(_parse(source), env)
    return _run


@pytest.fixture(autouse=True)
def _isolate_module_path(monkeypatch, tmp_path):
    # Module resolution must not depend on the developer's TERN_PATH or cwd
    monkeypatch.delenv("TERN_PATH", raising=False)
    monkeypatch.chdir(tmp_path)
