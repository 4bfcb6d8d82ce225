"""Pytest configuration and shared fixtures."""

from unittest.mock import MagicMock

import pytest

from dictionary_plus.config import DictionaryPlusConfig
from dictionary_plus.models import LookupResult
from dictionary_plus.orchestration import SearchController
from dictionary_plus.services import AppSettings, InMemoryPreferenceStore

HELLO_PAYLOAD = [
    {
        "word": "hello",
        "phonetic": "/həˈloʊ/",
        "meanings": [
            {
                "partOfSpeech": "exclamation",
                "definitions": [{"definition": "used as a greeting."}],
            }
        ],
    }
]


@pytest.fixture
def test_config(tmp_path):
    """Provide a test configuration with temporary paths."""
    return DictionaryPlusConfig(
        dictionary_api_url="https://dict.test/api/v2/entries",
        suggestion_api_url="https://sug.test/sug",
        request_timeout=3.0,
        preferences_path=tmp_path / "preferences.json",
    )


@pytest.fixture
def hello_payload():
    """Provide the dictionary service's response for "hello"."""
    return HELLO_PAYLOAD


class _ManualTimer:
    def __init__(self, due: float, callback):
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class _ManualTask:
    def __init__(self, task, on_success, on_error):
        self.task = task
        self.on_success = on_success
        self.on_error = on_error
        self.cancelled = False
        self.done = False

    def cancel(self) -> None:
        self.cancelled = True

    def complete(self) -> None:
        """Run the task and deliver its outcome.

        The outcome is delivered even if the handle was cancelled, like a
        request that was already on the wire; the caller must drop it.
        """
        self.done = True
        try:
            result = self.task()
        except Exception as e:
            self.on_error(e)
        else:
            self.on_success(result)


class ManualScheduler:
    """A real Scheduler implementation driven explicitly by the test.

    Timers fire only when ``advance`` moves the clock past their due time,
    and background tasks run only when ``complete`` is called on them.
    """

    def __init__(self):
        self.now = 0.0
        self.timers: list[_ManualTimer] = []
        self.tasks: list[_ManualTask] = []

    def call_later(self, delay, callback):
        timer = _ManualTimer(self.now + delay, callback)
        self.timers.append(timer)
        return timer

    def run_in_background(self, task, on_success, on_error):
        handle = _ManualTask(task, on_success, on_error)
        self.tasks.append(handle)
        return handle

    def advance(self, seconds: float) -> None:
        self.now += seconds
        due = sorted(
            (t for t in self.timers if not t.cancelled and not t.fired and t.due <= self.now),
            key=lambda t: t.due,
        )
        for timer in due:
            timer.fired = True
            timer.callback()

    @property
    def pending_timers(self) -> list[_ManualTimer]:
        return [t for t in self.timers if not t.cancelled and not t.fired]

    @property
    def pending_tasks(self) -> list[_ManualTask]:
        return [t for t in self.tasks if not t.done]

    def complete_all(self) -> None:
        for task in self.pending_tasks:
            task.complete()


@pytest.fixture
def scheduler():
    """Provide a manually driven scheduler."""
    return ManualScheduler()


@pytest.fixture
def memory_store():
    """Provide an empty in-memory preference store."""
    return InMemoryPreferenceStore()


@pytest.fixture
def settings(memory_store):
    """Provide first-run preferences over an in-memory store."""
    return AppSettings(memory_store)


@pytest.fixture
def dictionary_client():
    """Provide a mock dictionary client returning a "hello" entry."""
    client = MagicMock()
    client.fetch_entry.side_effect = lambda word, language_code="en": LookupResult.from_api(
        {**HELLO_PAYLOAD[0], "word": word}
    )
    return client


@pytest.fixture
def suggestion_client():
    """Provide a mock suggestion client echoing the prefix."""
    client = MagicMock()
    client.fetch_suggestions.side_effect = lambda prefix, limit=10: [
        f"{prefix}{i}" for i in range(limit)
    ]
    return client


class RecordingListener:
    """Subscriber that records every published snapshot."""

    def __init__(self):
        self.states = []

    def __call__(self, state) -> None:
        self.states.append(state)

    @property
    def last(self):
        return self.states[-1]


@pytest.fixture
def make_controller(test_config, dictionary_client, suggestion_client, settings, scheduler):
    """Factory fixture for SearchController wired to fakes.

    Returns (controller, listener); config fields can be overridden.
    """

    def _make(**config_overrides):
        from dataclasses import replace

        config = replace(test_config, **config_overrides) if config_overrides else test_config
        controller = SearchController(
            config=config,
            dictionary_client=dictionary_client,
            suggestion_client=suggestion_client,
            settings=settings,
            scheduler=scheduler,
        )
        listener = RecordingListener()
        controller.subscribe(listener)
        return controller, listener

    return _make
