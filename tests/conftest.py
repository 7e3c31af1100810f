"""
Pytest configuration and shared fixtures for all juliusgram tests.

The lark parser is built once per test session (grammar loading is the
expensive part); sessions are cheap and created fresh per test.
"""

import sys
import pytest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent))
from juliusgram.frontend.parser import Parser
from juliusgram.compiler.session import CompilationSession
from juliusgram.codegen.julius import generate
from juliusgram.transliteration import CallableTransliterator
from tests.test_utils import RecordingToolRunner, spell


# =============================================================================
# Session-scoped fixtures (shared across all tests)
# =============================================================================

@pytest.fixture(scope="session")
def session_parser():
    """Session-scoped parser; stateless, safe to share."""
    return Parser()


@pytest.fixture(scope="session")
def spelling_transliterator():
    return CallableTransliterator(spell)


# =============================================================================
# Function-scoped fixtures (default - one per test)
# =============================================================================

@pytest.fixture
def parser(session_parser):
    return session_parser


@pytest.fixture
def session(session_parser, spelling_transliterator):
    """Fresh compilation session using the spelling transliterator."""
    return CompilationSession(transliterator=spelling_transliterator, parser=session_parser)


@pytest.fixture
def compile_pattern(session_parser, spelling_transliterator):
    """Parse + generate one pattern without a session."""
    def _compile(pattern: str, start_id: int = 0):
        tree = session_parser.parse(pattern)
        return generate(tree, start_id, spelling_transliterator)
    return _compile


@pytest.fixture
def recording_runner():
    return RecordingToolRunner(stdout="ok\n")


def pytest_configure(config):
    """Register custom markers for test organization."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
