from __future__ import annotations

import logging
from typing import Optional

from typing_extensions import override

from epsilon_shell.entities.session import SystemFlags
from epsilon_shell.exceptions import ApplicationError
from epsilon_shell.ports.desktop.desktop_launcher_port import DesktopLauncherPort


class QtDesktopLauncher(DesktopLauncherPort):
    """Boots a PySide6 desktop window with an optional top bar and control bar."""

    def __init__(
        self,
        title: str = "Epsilon",
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._title = title
        self._logger = logger or logging.getLogger(__name__)

    @override
    def boot(self, flags: SystemFlags) -> int:
        try:
            # PySide6 is an optional extra; only the gui command needs it
            from PySide6.QtCore import QDateTime, Qt, QTimer
            from PySide6.QtWidgets import (
                QApplication,
                QLabel,
                QMainWindow,
                QPushButton,
                QToolBar,
                QWidget,
            )
        except ImportError as e:
            raise ApplicationError(
                f"PySide6 is not installed (pip install 'epsilon-shell[gui]'): {e}"
            )

        try:
            app = QApplication.instance() or QApplication([])
            app.setStyle("Fusion")

            win = QMainWindow()
            win.setWindowTitle(self._title)
            win.resize(1024, 768)
            win.setCentralWidget(QWidget())

            if flags.top_bar_activated:
                top = QToolBar("Top bar")
                top.setMovable(False)
                top.addWidget(QLabel(f" {self._title} "))
                clock = QLabel()
                top.addSeparator()
                top.addWidget(clock)

                def _tick() -> None:
                    clock.setText(QDateTime.currentDateTime().toString("HH:mm"))

                _tick()
                timer = QTimer(win)
                timer.timeout.connect(_tick)
                timer.start(1000)
                win.addToolBar(top)

            if flags.control_bar_activated:
                bottom = QToolBar("Control bar")
                bottom.setMovable(False)
                back = QPushButton("Shell")
                back.clicked.connect(win.close)
                bottom.addWidget(back)
                win.addToolBar(Qt.ToolBarArea.BottomToolBarArea, bottom)

            self._logger.info(
                f"Booting desktop (top bar={flags.top_bar_activated}, "
                f"control bar={flags.control_bar_activated})"
            )
            win.show()
            code = app.exec()
            self._logger.info(f"Desktop closed (code={code})")
            return code
        except Exception as e:
            self._logger.error(f"Failed to boot desktop: {e}")
            raise ApplicationError(f"Failed to boot desktop: {e}")
