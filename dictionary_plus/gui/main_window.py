"""Main window for Dictionary Plus GUI."""

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QKeySequence, QShortcut
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QMessageBox,
    QSplitter,
    QTextBrowser,
    QVBoxLayout,
    QWidget,
)

from dictionary_plus import __version__
from dictionary_plus.gui.constants import (
    EMPTY_STATE_HINT,
    LOADING_TEXT,
    ROTATING_TITLES,
    SEARCH_FIELD_MAX_WIDTH,
    SIDEBAR_WIDTH,
    TITLE_ROTATION_INTERVAL_MS,
    WINDOW_DEFAULT_HEIGHT,
    WINDOW_DEFAULT_WIDTH,
    WINDOW_MIN_HEIGHT,
    WINDOW_MIN_WIDTH,
)
from dictionary_plus.gui.result_formatter import format_result_html
from dictionary_plus.gui.widgets import SettingsDialog
from dictionary_plus.models import SearchPhase, SearchState
from dictionary_plus.orchestration import SearchController
from dictionary_plus.services import AppSettings


class MainWindow(QMainWindow):
    """Main application window for Dictionary Plus.

    This window provides:
    - A sidebar listing the enabled dictionaries
    - A search field with live suggestions
    - The result of the latest lookup

    The window only renders SearchState snapshots and forwards user events
    to the SearchController.
    """

    def __init__(self, controller: SearchController, settings: AppSettings):
        """Initialize the main window.

        Args:
            controller: Search session controller
            settings: User preferences (edited by the settings dialog)
        """
        super().__init__()
        self.controller = controller
        self.settings = settings
        self._has_searched = False
        self._title_index = 0

        self._setup_ui()
        self._connect_signals()

        self._unsubscribe = controller.subscribe(self.render)
        self.render(controller.state)

        self._title_timer = QTimer(self)
        self._title_timer.timeout.connect(self._rotate_title)
        self._title_timer.start(TITLE_ROTATION_INTERVAL_MS)

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        self.setWindowTitle("Dictionary+")
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)
        self.resize(WINDOW_DEFAULT_WIDTH, WINDOW_DEFAULT_HEIGHT)

        splitter = QSplitter(Qt.Orientation.Horizontal)

        # Sidebar
        sidebar = QWidget()
        sidebar_layout = QVBoxLayout()
        sidebar_layout.setContentsMargins(8, 8, 8, 8)
        sidebar_label = QLabel("Dictionaries")
        sidebar_label.setStyleSheet("font-weight: bold;")
        sidebar_layout.addWidget(sidebar_label)
        self.dictionary_list = QListWidget()
        sidebar_layout.addWidget(self.dictionary_list)
        sidebar.setLayout(sidebar_layout)
        sidebar.setMinimumWidth(SIDEBAR_WIDTH)
        splitter.addWidget(sidebar)

        # Detail
        detail = QWidget()
        detail_layout = QVBoxLayout()
        detail_layout.setContentsMargins(24, 16, 24, 16)
        detail_layout.setSpacing(8)

        self.title_label = QLabel(ROTATING_TITLES[0])
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.title_label.setStyleSheet("font-size: 28px; font-weight: bold;")
        detail_layout.addWidget(self.title_label)

        search_row = QHBoxLayout()
        search_row.addStretch()
        search_column = QVBoxLayout()
        search_column.setSpacing(4)
        self.search_field = QLineEdit()
        self.search_field.setPlaceholderText("Search")
        self.search_field.setClearButtonEnabled(True)
        self.search_field.setMaximumWidth(SEARCH_FIELD_MAX_WIDTH)
        search_column.addWidget(self.search_field)
        self.suggestion_list = QListWidget()
        self.suggestion_list.setMaximumWidth(SEARCH_FIELD_MAX_WIDTH)
        self.suggestion_list.hide()
        search_column.addWidget(self.suggestion_list)
        search_row.addLayout(search_column)
        search_row.addStretch()
        detail_layout.addLayout(search_row)

        self.status_label = QLabel(EMPTY_STATE_HINT)
        self.status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.status_label.setStyleSheet("color: gray;")
        detail_layout.addWidget(self.status_label)

        self.result_view = QTextBrowser()
        self.result_view.setOpenExternalLinks(True)
        self.result_view.hide()
        detail_layout.addWidget(self.result_view, stretch=1)

        detail.setLayout(detail_layout)
        splitter.addWidget(detail)
        splitter.setStretchFactor(1, 1)

        self.setCentralWidget(splitter)

        self._setup_menu_bar()
        self._setup_shortcuts()

    def _setup_menu_bar(self) -> None:
        """Set up the application menu bar."""
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        settings_action = file_menu.addAction("Settings…")
        settings_action.setShortcut(QKeySequence("Ctrl+,"))
        settings_action.triggered.connect(self._open_settings)
        file_menu.addSeparator()
        quit_action = file_menu.addAction("Quit")
        quit_action.setShortcut(QKeySequence("Ctrl+Q"))
        quit_action.triggered.connect(self.close)

        help_menu = menu_bar.addMenu("&Help")
        about_action = help_menu.addAction("About Dictionary+")
        about_action.setShortcut(QKeySequence("F1"))
        about_action.triggered.connect(self._show_about)

    def _setup_shortcuts(self) -> None:
        """Set up global keyboard shortcuts."""
        # Focus search (Ctrl+F)
        focus_shortcut = QShortcut(QKeySequence("Ctrl+F"), self)
        focus_shortcut.activated.connect(self.search_field.setFocus)

    def _connect_signals(self) -> None:
        """Forward widget events to the controller."""
        self.search_field.textChanged.connect(self.controller.set_query)
        self.search_field.returnPressed.connect(self.controller.submit)
        # Single-click styles emit both signals for one click
        self.suggestion_list.itemClicked.connect(self._on_suggestion_chosen)
        self.suggestion_list.itemActivated.connect(self._on_suggestion_chosen)
        self.dictionary_list.currentItemChanged.connect(self._on_dictionary_changed)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, state: SearchState) -> None:
        """Update every widget from a state snapshot.

        Args:
            state: Snapshot published by the controller
        """
        if self.search_field.text() != state.query:
            self.search_field.blockSignals(True)
            self.search_field.setText(state.query)
            self.search_field.blockSignals(False)

        self._render_dictionaries(state)
        self._render_suggestions(state)
        self._render_status(state)
        self._render_result(state)

    def _render_dictionaries(self, state: SearchState) -> None:
        self.dictionary_list.blockSignals(True)
        names = [item.display_name for item in state.enabled_dictionaries]
        current = [self.dictionary_list.item(i).text() for i in range(self.dictionary_list.count())]
        if names != current:
            self.dictionary_list.clear()
            for dictionary in state.enabled_dictionaries:
                list_item = QListWidgetItem(dictionary.display_name)
                list_item.setData(Qt.ItemDataRole.UserRole, dictionary)
                self.dictionary_list.addItem(list_item)

        for i in range(self.dictionary_list.count()):
            list_item = self.dictionary_list.item(i)
            if list_item.data(Qt.ItemDataRole.UserRole) == state.active_dictionary:
                self.dictionary_list.setCurrentItem(list_item)
                break
        else:
            self.dictionary_list.setCurrentItem(None)
        self.dictionary_list.blockSignals(False)

    def _render_suggestions(self, state: SearchState) -> None:
        self.suggestion_list.clear()
        if state.visible_suggestions:
            self.suggestion_list.addItems(list(state.visible_suggestions))
            self.suggestion_list.show()
        else:
            self.suggestion_list.hide()

    def _render_status(self, state: SearchState) -> None:
        if state.phase is SearchPhase.LOADING:
            self._has_searched = True
            self.status_label.setText(LOADING_TEXT)
        elif state.phase is SearchPhase.ERROR and state.error is not None:
            self.status_label.setText(state.error.message)
        elif state.has_result:
            self.status_label.setText("")
        else:
            self.status_label.setText(EMPTY_STATE_HINT)

        self.title_label.setVisible(not self._has_searched)

    def _render_result(self, state: SearchState) -> None:
        if state.has_result and state.result is not None:
            self.result_view.setHtml(format_result_html(state.result, state.show_description))
            self.result_view.show()
        else:
            self.result_view.clear()
            self.result_view.hide()

    def _rotate_title(self) -> None:
        if self._has_searched:
            self._title_timer.stop()
            return
        self._title_index = (self._title_index + 1) % len(ROTATING_TITLES)
        self.title_label.setText(ROTATING_TITLES[self._title_index])

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def _on_suggestion_chosen(self, item: QListWidgetItem) -> None:
        word = item.text()
        # Defer so the list is not rebuilt while Qt is still delivering the click
        QTimer.singleShot(0, lambda: self._submit_suggestion(word))

    def _submit_suggestion(self, word: str) -> None:
        state = self.controller.state
        if state.is_loading and state.query == word:
            return
        self.controller.select_suggestion(word)

    def _on_dictionary_changed(self, current: QListWidgetItem | None, previous) -> None:
        dictionary = current.data(Qt.ItemDataRole.UserRole) if current is not None else None
        self.controller.select_dictionary(dictionary)

    def _open_settings(self) -> None:
        """Open the settings dialog."""
        dialog = SettingsDialog(self.settings, self)
        dialog.preferences_changed.connect(self.controller.refresh_preferences)
        dialog.exec()

    def _show_about(self) -> None:
        """Show the About dialog."""
        about_text = f"""
        <h2>Dictionary+</h2>
        <p><b>Version:</b> {__version__}</p>
        <p>Look up definitions from the Free Dictionary API,
        with live suggestions from Datamuse.</p>
        <br>
        <p><b>Keyboard Shortcuts:</b></p>
        <ul>
            <li><b>Ctrl+F:</b> Focus the search field</li>
            <li><b>Ctrl+,:</b> Open Settings</li>
            <li><b>F1:</b> Show this help dialog</li>
        </ul>
        """
        QMessageBox.about(self, "About Dictionary+", about_text)

    def closeEvent(self, event) -> None:
        """Stop pending work before the window goes away."""
        self._title_timer.stop()
        self._unsubscribe()
        self.controller.shutdown()
        super().closeEvent(event)
