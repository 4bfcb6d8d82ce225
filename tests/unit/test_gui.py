"""Tests for the Qt scheduler, settings dialog and main window.

Requires PyQt6 to be importable. Tests are skipped if PyQt6 is unavailable.
"""

import os
from unittest.mock import patch

import pytest

from dictionary_plus.models import DictionaryItem, LookupResult, SearchPhase
from dictionary_plus.services import AppSettings

# Render off-screen so the tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

try:
    from PyQt6.QtTest import QTest
    from PyQt6.QtWidgets import QApplication

    # Create QApplication if not already running (needed for any widget)
    _app = QApplication.instance() or QApplication([])
    _HAS_QT = True
except (ImportError, RuntimeError):
    _HAS_QT = False

pytestmark = pytest.mark.skipif(not _HAS_QT, reason="PyQt6 not available")


def _wait_until(predicate, timeout_ms=2000):
    """Process Qt events until predicate() is true or the timeout passes."""
    waited = 0
    while not predicate() and waited < timeout_ms:
        QTest.qWait(10)
        waited += 10
    return predicate()


# ---------------------------------------------------------------------------
# QtScheduler
# ---------------------------------------------------------------------------


class TestQtScheduler:
    """Tests for QtScheduler timers and background tasks."""

    @pytest.fixture
    def qt_scheduler(self):
        from dictionary_plus.gui.utils import QtScheduler

        scheduler = QtScheduler()
        yield scheduler
        scheduler.shutdown()

    def test_call_later_fires(self, qt_scheduler):
        fired = []
        qt_scheduler.call_later(0.01, lambda: fired.append(True))
        assert _wait_until(lambda: fired)

    def test_cancelled_timer_never_fires(self, qt_scheduler):
        fired = []
        handle = qt_scheduler.call_later(0.02, lambda: fired.append(True))
        handle.cancel()
        QTest.qWait(100)
        assert fired == []

    def test_cancel_after_fire_is_harmless(self, qt_scheduler):
        fired = []
        handle = qt_scheduler.call_later(0, lambda: fired.append(True))
        assert _wait_until(lambda: fired)
        handle.cancel()

    def test_background_result_delivered(self, qt_scheduler):
        results = []
        qt_scheduler.run_in_background(lambda: 41 + 1, results.append, pytest.fail)
        assert _wait_until(lambda: results)
        assert results == [42]

    def test_background_error_delivered(self, qt_scheduler):
        errors = []

        def task():
            raise ValueError("boom")

        qt_scheduler.run_in_background(task, pytest.fail, errors.append)
        assert _wait_until(lambda: errors)
        assert isinstance(errors[0], ValueError)

    def test_cancelled_task_not_delivered(self, qt_scheduler):
        results = []

        def slow():
            QTest.qSleep(50)
            return "late"

        handle = qt_scheduler.run_in_background(slow, results.append, results.append)
        handle.cancel()
        QTest.qWait(200)
        assert results == []


# ---------------------------------------------------------------------------
# SettingsDialog
# ---------------------------------------------------------------------------


class TestSettingsDialog:
    """Tests for SettingsDialog write-through behaviour."""

    @pytest.fixture
    def dialog(self, settings):
        from dictionary_plus.gui.widgets import SettingsDialog

        dialog = SettingsDialog(settings)
        yield dialog
        dialog.close()

    def test_loads_current_settings(self, dialog):
        assert dialog.suggestions_checkbox.isChecked() is True
        assert dialog.dictionary_checkboxes[DictionaryItem.FRENCH].isChecked() is True
        assert dialog.dictionary_checkboxes[DictionaryItem.DUTCH].isChecked() is False

    def test_toggle_suggestions_writes_through(self, dialog, settings):
        changed = []
        dialog.preferences_changed.connect(lambda: changed.append(True))

        dialog.suggestions_checkbox.setChecked(False)

        assert settings.enable_suggestions is False
        assert changed == [True]

    def test_toggle_dictionary_writes_through(self, dialog, memory_store):
        dialog.dictionary_checkboxes[DictionaryItem.DUTCH].setChecked(True)
        dialog.dictionary_checkboxes[DictionaryItem.FRENCH].setChecked(False)

        reloaded = AppSettings(memory_store)
        assert reloaded.is_dictionary_enabled(DictionaryItem.DUTCH)
        assert not reloaded.is_dictionary_enabled(DictionaryItem.FRENCH)

    def test_failed_save_reverts_checkbox(self, dialog, settings, memory_store):
        from dictionary_plus.exceptions import PreferenceStoreError

        with (
            patch.object(
                memory_store, "set_string_set", side_effect=PreferenceStoreError("disk full")
            ),
            patch("dictionary_plus.gui.widgets.settings_dialog.QMessageBox.warning") as warning,
        ):
            dialog.dictionary_checkboxes[DictionaryItem.DUTCH].setChecked(True)

        warning.assert_called_once()
        assert dialog.dictionary_checkboxes[DictionaryItem.DUTCH].isChecked() is False
        assert not settings.is_dictionary_enabled(DictionaryItem.DUTCH)

    def test_dictionaries_listed_by_display_name(self, dialog):
        labels = [cb.text() for cb in dialog.dictionary_checkboxes.values()]
        assert labels == [item.display_name for item in DictionaryItem]


# ---------------------------------------------------------------------------
# MainWindow
# ---------------------------------------------------------------------------


class TestMainWindow:
    """Tests for MainWindow rendering and event forwarding."""

    @pytest.fixture
    def window(self, make_controller):
        from dictionary_plus.gui.main_window import MainWindow

        controller, _ = make_controller(description_stagger=0)
        window = MainWindow(controller, controller.settings)
        yield window
        window.close()

    def test_sidebar_lists_enabled_dictionaries(self, window):
        names = [
            window.dictionary_list.item(i).text() for i in range(window.dictionary_list.count())
        ]
        assert names == ["English Thesaurus", "Swedish", "English", "French"]
        assert window.dictionary_list.currentItem().text() == "English Thesaurus"

    def test_typing_forwards_to_controller(self, window, scheduler):
        window.search_field.setText("ca")
        assert window.controller.state.query == "ca"
        assert window.controller.state.phase is SearchPhase.SUGGESTING

    def test_suggestions_shown_and_capped(self, window, scheduler):
        window.search_field.setText("ca")
        scheduler.advance(0.2)
        scheduler.complete_all()

        assert window.suggestion_list.isHidden() is False
        assert window.suggestion_list.count() == 8

    def test_selecting_suggestion_submits(self, window, scheduler):
        window.search_field.setText("hel")
        scheduler.advance(0.2)
        scheduler.complete_all()

        window.controller.select_suggestion("hello")
        scheduler.complete_all()

        assert window.search_field.text() == "hello"
        assert window.suggestion_list.isHidden() is True
        assert window.result_view.isHidden() is False
        assert "hello" in window.result_view.toPlainText()

    def test_click_and_activate_submit_once(self, window, scheduler, dictionary_client):
        window.search_field.setText("hel")
        scheduler.advance(0.2)
        scheduler.complete_all()

        item = window.suggestion_list.item(0)
        word = item.text()
        window.suggestion_list.itemClicked.emit(item)
        window.suggestion_list.itemActivated.emit(item)
        assert _wait_until(lambda: window.controller.state.is_loading)
        QTest.qWait(50)

        assert len(scheduler.pending_tasks) == 1
        scheduler.complete_all()
        dictionary_client.fetch_entry.assert_called_once_with(word, "en")
        assert window.controller.state.query == word

    def test_error_message_shown(self, window, scheduler, dictionary_client):
        from dictionary_plus.exceptions import EmptyResultsError

        dictionary_client.fetch_entry.side_effect = EmptyResultsError("404")
        window.search_field.setText("qwzx")
        window.controller.submit()
        scheduler.complete_all()

        assert window.status_label.text() == "No results found."
        assert window.result_view.isHidden() is True

    def test_selecting_dictionary_forwards(self, window):
        window.dictionary_list.setCurrentRow(3)
        assert window.controller.state.active_dictionary is DictionaryItem.FRENCH

    def test_render_result_header_before_description(self, window):
        from dictionary_plus.models import SearchState

        result = LookupResult.from_api(
            {"word": "cat", "meanings": [{"definitions": [{"definition": "A feline."}]}]}
        )
        window.render(SearchState(query="cat", phase=SearchPhase.SUCCESS, result=result))
        assert "A feline." not in window.result_view.toPlainText()

        window.render(
            SearchState(
                query="cat", phase=SearchPhase.SUCCESS, result=result, show_description=True
            )
        )
        assert "A feline." in window.result_view.toPlainText()
