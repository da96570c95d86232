import logging
import sys

from PyQt6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QLineEdit, QPushButton, QGroupBox, QGridLayout, QCheckBox
)
from PyQt6.QtGui import QFont

from graph_widget import GraphWidget
from logging_config import setup_logging
from plot_functions import (
    DEFAULT_STEP, DEFAULT_XMAX, DEFAULT_XMIN, DEFAULT_YMAX, DEFAULT_YMIN,
    FUNCTIONS, effective_step, parse_number, sample_function
)

logger = logging.getLogger(__name__)

APP_NAME = "Function Plotter"

# (attribute, label, initial text, default value)
INTERVAL_FIELDS = [
    ('x_min_input', "X min:", "-10", DEFAULT_XMIN),
    ('x_max_input', "X max:", "10", DEFAULT_XMAX),
    ('y_min_input', "Y min:", "-10", DEFAULT_YMIN),
    ('y_max_input', "Y max:", "10", DEFAULT_YMAX),
    ('step_input', "X step:", "0.1", DEFAULT_STEP),
]


class FunctionPlotter(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle(APP_NAME)

        self.function_checks = []
        self.init_ui()

    def init_ui(self):
        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QHBoxLayout(main_widget)

        control_panel = self.create_control_panel()
        main_layout.addLayout(control_panel, 0)

        self.graph_widget = GraphWidget()
        main_layout.addWidget(self.graph_widget, 1)

    def create_control_panel(self):
        layout = QVBoxLayout()

        # Function toggles
        func_group = QGroupBox("Functions")
        func_layout = QVBoxLayout()
        for index, (name, label, _func) in enumerate(FUNCTIONS):
            check = QCheckBox(label)
            check.setChecked(index == 0)
            func_layout.addWidget(check)
            self.function_checks.append(check)
        func_group.setLayout(func_layout)
        layout.addWidget(func_group)

        # Interval inputs
        interval_group = QGroupBox("Intervals")
        grid = QGridLayout()
        for row, (attr, label, text, _default) in enumerate(INTERVAL_FIELDS):
            line_edit = QLineEdit()
            line_edit.setText(text)
            setattr(self, attr, line_edit)
            grid.addWidget(QLabel(label), row, 0)
            grid.addWidget(line_edit, row, 1)
        interval_group.setLayout(grid)
        layout.addWidget(interval_group)

        self.plot_button = QPushButton("Plot")
        self.plot_button.setFont(QFont("Arial", 12, QFont.Weight.Bold))
        self.plot_button.setStyleSheet("""
            QPushButton {
                background-color: #4CAF50;
                color: white;
                border: none;
                padding: 10px;
                border-radius: 5px;
            }
            QPushButton:hover {
                background-color: #45a049;
            }
        """)
        self.plot_button.clicked.connect(self.plot_function)
        layout.addWidget(self.plot_button)

        self.clear_button = QPushButton("Clear")
        self.clear_button.setFont(QFont("Arial", 12))
        self.clear_button.setStyleSheet("""
            QPushButton {
                background-color: #f44336;
                color: white;
                border: none;
                padding: 10px;
                border-radius: 5px;
            }
            QPushButton:hover {
                background-color: #da190b;
            }
        """)
        self.clear_button.clicked.connect(self.clear_plot)
        layout.addWidget(self.clear_button)

        layout.addStretch()
        return layout

    def read_bounds(self):
        """Parse the interval fields, substituting defaults for bad input"""
        values = [
            parse_number(getattr(self, attr).text(), default)
            for attr, _label, _text, default in INTERVAL_FIELDS
        ]
        xmin, xmax, ymin, ymax, step = values
        return xmin, xmax, ymin, ymax, effective_step(step)

    def plot_function(self):
        """Sample the checked functions and hand them to the canvas"""
        xmin, xmax, ymin, ymax, step = self.read_bounds()

        sample_sets = []
        for check, (name, _label, func) in zip(self.function_checks, FUNCTIONS):
            if check.isChecked():
                sample_sets.append(sample_function(name, func, xmin, xmax, step))

        logger.debug(f"Plotting {[s.name for s in sample_sets]} with step {step}")
        self.graph_widget.set_multiple(sample_sets, xmin, xmax, ymin, ymax)

    def clear_plot(self):
        """Clear the canvas"""
        self.graph_widget.clear_data()


def create_app():
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    return app


def main():
    setup_logging()
    app = create_app()
    window = FunctionPlotter()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
