"""Settings dialog with General and Dictionaries tabs."""

import logging

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QCheckBox,
    QDialog,
    QDialogButtonBox,
    QLabel,
    QMessageBox,
    QScrollArea,
    QTabWidget,
    QVBoxLayout,
    QWidget,
)

from dictionary_plus.exceptions import PreferenceStoreError
from dictionary_plus.gui.constants import SETTINGS_DIALOG_HEIGHT, SETTINGS_DIALOG_WIDTH
from dictionary_plus.models import DictionaryItem
from dictionary_plus.services import AppSettings

logger = logging.getLogger(__name__)


class SettingsDialog(QDialog):
    """Dialog for the user preferences.

    Every toggle is written through to AppSettings immediately; there is no
    separate save step.

    Signals:
        preferences_changed: Emitted after any preference was changed
    """

    preferences_changed = pyqtSignal()

    def __init__(self, settings: AppSettings, parent=None):
        """Initialize the settings dialog.

        Args:
            settings: Preferences to edit
            parent: Optional parent widget
        """
        super().__init__(parent)
        self.settings = settings
        self.dictionary_checkboxes: dict[DictionaryItem, QCheckBox] = {}
        self._setup_ui()
        self._load_settings()

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        self.setWindowTitle("Settings")
        self.resize(SETTINGS_DIALOG_WIDTH, SETTINGS_DIALOG_HEIGHT)

        layout = QVBoxLayout()
        layout.setContentsMargins(20, 20, 20, 20)

        self.tab_widget = QTabWidget()
        self.tab_widget.addTab(self._create_general_tab(), "General")
        self.tab_widget.addTab(self._create_dictionaries_tab(), "Dictionaries")
        layout.addWidget(self.tab_widget)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Close)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

        self.setLayout(layout)

    def _create_general_tab(self) -> QWidget:
        tab = QWidget()
        layout = QVBoxLayout()

        self.suggestions_checkbox = QCheckBox("Enable search suggestions")
        self.suggestions_checkbox.setToolTip("Show matching words while typing")
        self.suggestions_checkbox.toggled.connect(self._on_suggestions_toggled)
        layout.addWidget(self.suggestions_checkbox)
        layout.addStretch()

        tab.setLayout(layout)
        return tab

    def _create_dictionaries_tab(self) -> QWidget:
        tab = QWidget()
        layout = QVBoxLayout()

        header = QLabel("Enabled dictionaries")
        header.setStyleSheet("font-weight: bold;")
        layout.addWidget(header)

        list_widget = QWidget()
        list_layout = QVBoxLayout()
        for item in DictionaryItem:
            checkbox = QCheckBox(item.display_name)
            checkbox.toggled.connect(
                lambda checked, item=item: self._on_dictionary_toggled(item, checked)
            )
            self.dictionary_checkboxes[item] = checkbox
            list_layout.addWidget(checkbox)
        list_layout.addStretch()
        list_widget.setLayout(list_layout)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(list_widget)
        layout.addWidget(scroll)

        tab.setLayout(layout)
        return tab

    def _load_settings(self) -> None:
        """Populate the controls without writing anything back."""
        self.suggestions_checkbox.blockSignals(True)
        self.suggestions_checkbox.setChecked(self.settings.enable_suggestions)
        self.suggestions_checkbox.blockSignals(False)

        for item, checkbox in self.dictionary_checkboxes.items():
            checkbox.blockSignals(True)
            checkbox.setChecked(self.settings.is_dictionary_enabled(item))
            checkbox.blockSignals(False)

    def _on_suggestions_toggled(self, checked: bool) -> None:
        try:
            self.settings.enable_suggestions = checked
        except PreferenceStoreError as e:
            self._show_save_error(e)
        self.preferences_changed.emit()

    def _on_dictionary_toggled(self, item: DictionaryItem, checked: bool) -> None:
        try:
            self.settings.set_dictionary_enabled(item, checked)
        except PreferenceStoreError as e:
            self._show_save_error(e)
        self.preferences_changed.emit()

    def _show_save_error(self, error: PreferenceStoreError) -> None:
        logger.error(f"Failed to save preferences: {error}")
        self._load_settings()
        QMessageBox.warning(self, "Settings", f"Failed to save preferences:\n{error}")
