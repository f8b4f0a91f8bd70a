import logging
import sys

from PySide6 import QtCore, QtWidgets

from bezierpad.core import EditorConfig, EditorSession
from bezierpad.logging_config import setup_logging
from bezierpad.widgets import CurveCanvasWidget

# seeded so a fresh window already shows a cubic
DEFAULT_CONFIG = EditorConfig(
    initial_points=((90.0, 540.0), (270.0, 30.0), (630.0, 570.0), (810.0, 60.0)),
)


class MyWidget(QtWidgets.QWidget):
    def __init__(self, config: EditorConfig = DEFAULT_CONFIG):
        super().__init__()

        self.layout = QtWidgets.QVBoxLayout(self)
        self.top_bar = QtWidgets.QHBoxLayout()

        self.canvas = CurveCanvasWidget(EditorSession(config), parent=self)

        self.status = QtWidgets.QLabel()
        self.clear_button = QtWidgets.QPushButton("Clear")
        self.clear_button.setFocusPolicy(QtCore.Qt.FocusPolicy.NoFocus)
        self.clear_button.clicked.connect(self.canvas.clear)

        self.top_bar.addWidget(self.status)
        self.top_bar.addStretch(1)
        self.top_bar.addWidget(self.clear_button)
        self.layout.addLayout(self.top_bar)
        self.layout.addWidget(self.canvas, alignment=QtCore.Qt.AlignmentFlag.AlignCenter)

        self.canvas.pointsChanged.connect(self.refresh)
        self.refresh()
        self.canvas.setFocus()

    def refresh(self):
        session = self.canvas.session
        self.status.setText(
            f"{len(session.store)} control points, {len(session.curve)} curve samples"
            "  |  left: add/drag  right: delete  enter/space: clear"
        )


def main() -> int:
    setup_logging(logging.INFO)
    app = QtWidgets.QApplication(sys.argv)

    widget = MyWidget()
    widget.setWindowTitle("Bezier Curve Editor")
    widget.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
