"""Shared pytest fixtures for the prompt engine tests."""

import shutil
from pathlib import Path

import pytest

from src.rules.store import RuleStore, reset_rule_store
from src.utils.config import reset_settings
from src.utils.logging_config import reset_logging

SAMPLE_DOCUMENT = """# Sample Model - Prompting Best Practices

## TL;DR

### RULES
1. Be **explicit** about the task.
2. Use `XML` tags for structure.
- See [the guide](https://example.com/guide) for details.

### AVOID
- Vague permissions such as *you can try*.

### QUICK START
```xml
<task>
[What to do]
</task>
```

## General rules
- Rule one
- Rule two
- Rule three
- Rule four
- Rule five
- Rule six

## Tips
- First tip
- Second tip

## Checklist
- [ ] Is the task explicit?
- [x] Are tags used?
"""


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(scope="session", autouse=True)
def backup_env_file():
    """Backup .env file during test session to prevent pollution."""
    env_file = Path(".env")
    backup_file = Path(".env.test_backup")

    # Backup if exists
    if env_file.exists():
        shutil.copy(env_file, backup_file)
        env_file.unlink()

    yield

    # Restore
    if backup_file.exists():
        shutil.move(backup_file, env_file)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Drop cached settings, logging setup and the shared rule store around each test."""
    reset_settings()
    reset_rule_store()
    yield
    reset_rule_store()
    reset_settings()
    reset_logging()


@pytest.fixture
def sample_document_text() -> str:
    """Markdown text of a small, complete knowledge document."""
    return SAMPLE_DOCUMENT


@pytest.fixture
def fake_clock() -> FakeClock:
    """Clock that only moves when the test advances it."""
    return FakeClock()


@pytest.fixture
def rule_store(fake_clock: FakeClock) -> RuleStore:
    """Rule store over the bundled knowledge documents with a fake clock."""
    return RuleStore(ttl_seconds=3600, clock=fake_clock)
