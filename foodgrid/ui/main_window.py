"""Main window for the food grid Q-Learning demo."""

from PySide6.QtWidgets import (
    QMainWindow, QVBoxLayout, QHBoxLayout, QWidget, QPushButton,
    QLabel, QSlider, QStatusBar, QGroupBox
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QKeySequence, QShortcut, QCloseEvent

from ..app.controller import SimulationController
from ..app.fsm import RunState
from ..domain.types import ACTIONS, STATE_LABELS
from .grid_view import GridView


class MainWindow(QMainWindow):
    """Window showing the board, the score and the learned Q-values."""

    def __init__(self, controller: SimulationController):
        super().__init__()
        self.controller = controller

        self.setWindowTitle("Food Grid - Q-Learning Agent")
        self.setMinimumSize(760, 520)

        self._create_ui()
        self._setup_connections()
        self._setup_shortcuts()

        self._update_button_states()
        self._update_statistics_display()

    def _create_ui(self):
        """Create the user interface."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)

        main_layout.addLayout(self._create_controls())

        content_layout = QHBoxLayout()
        self.grid_view = GridView(self.controller)
        content_layout.addWidget(self.grid_view, 3)
        content_layout.addWidget(self._create_statistics_panel(), 2)
        main_layout.addLayout(content_layout, 1)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self._update_status_message()

    def _create_controls(self) -> QHBoxLayout:
        """Create the control panel."""
        layout = QHBoxLayout()

        self.start_btn = QPushButton("Start")
        self.pause_btn = QPushButton("Pause")
        self.step_btn = QPushButton("Step")
        for btn in [self.start_btn, self.pause_btn, self.step_btn]:
            layout.addWidget(btn)

        layout.addWidget(QLabel("Delay:"))
        self.speed_slider = QSlider(Qt.Horizontal)
        self.speed_slider.setRange(1, 500)
        self.speed_slider.setValue(self.controller.delay_ms)
        layout.addWidget(self.speed_slider)

        self.speed_label = QLabel(f"{self.controller.delay_ms}ms")
        self.speed_label.setMinimumWidth(50)
        layout.addWidget(self.speed_label)
        layout.addStretch()
        return layout

    def _create_statistics_panel(self) -> QGroupBox:
        """Create the statistics panel."""
        group = QGroupBox("Statistics")
        layout = QVBoxLayout(group)

        self.score_label = QLabel()
        self.ticks_label = QLabel()
        self.captures_label = QLabel()
        self.walls_label = QLabel()
        self.recent_label = QLabel()
        for label in [self.score_label, self.ticks_label, self.captures_label,
                      self.walls_label, self.recent_label]:
            layout.addWidget(label)

        layout.addWidget(QLabel("Q-values (UP / DOWN / LEFT / RIGHT):"))
        self.q_table_label = QLabel()
        self.q_table_label.setStyleSheet("font-family: monospace;")
        layout.addWidget(self.q_table_label)
        layout.addStretch()
        return group

    def _setup_connections(self):
        self.start_btn.clicked.connect(self._on_start_clicked)
        self.pause_btn.clicked.connect(self._on_pause_clicked)
        self.step_btn.clicked.connect(self._on_step_clicked)
        self.speed_slider.valueChanged.connect(self._on_speed_changed)

        self.controller.state_changed.connect(self._on_state_changed)
        self.controller.tick_completed.connect(self._on_tick_completed)
        self.controller.error_occurred.connect(self._on_error_occurred)

    def _setup_shortcuts(self):
        QShortcut(QKeySequence("Space"), self, self._on_pause_clicked)
        QShortcut(QKeySequence("S"), self, self._on_step_clicked)
        QShortcut(QKeySequence("Q"), self, self.close)

    # Event handlers

    def _on_start_clicked(self):
        self.controller.start()

    def _on_pause_clicked(self):
        self.controller.toggle_pause()

    def _on_step_clicked(self):
        self.controller.step()

    def _on_speed_changed(self, value: int):
        self.controller.set_delay(value)
        self.speed_label.setText(f"{value}ms")

    def _on_state_changed(self, state: RunState):
        self._update_button_states()
        self._update_status_message()

    def _on_tick_completed(self, result):
        self._update_statistics_display()

    def _on_error_occurred(self, error_msg: str):
        self.status_bar.showMessage(f"Error: {error_msg}")

    # Display updates

    def _update_button_states(self):
        state = self.controller.current_state
        self.start_btn.setEnabled(state == RunState.IDLE)
        self.pause_btn.setEnabled(state in (RunState.RUNNING, RunState.PAUSED))
        self.pause_btn.setText("Resume" if state == RunState.PAUSED else "Pause")
        self.step_btn.setEnabled(state == RunState.PAUSED)

    def _update_status_message(self):
        self.status_bar.showMessage(self.controller.simulation.state_machine.get_state_description())

    def _update_statistics_display(self):
        stats = self.controller.get_statistics()
        self.score_label.setText(f"Score: {stats['score']}")
        self.ticks_label.setText(f"Ticks: {stats['ticks']}")
        self.captures_label.setText(f"Captures: {stats['captures']}")
        self.walls_label.setText(f"Wall hits: {stats['wall_hits']}")
        self.recent_label.setText(
            f"Recent: {stats['recent_capture_rate']:.1%} captures, "
            f"{stats['recent_average_reward']:.2f} avg reward"
        )

        table = self.controller.simulation.agent.table
        rows = []
        for state in STATE_LABELS:
            values = " ".join(f"{table.get(state, action):8.2f}" for action in ACTIONS)
            rows.append(f"{state.name:<10}{values}")
        self.q_table_label.setText("\n".join(rows))

    def closeEvent(self, event: QCloseEvent):
        """Stop ticking before the window goes away."""
        self.controller.stop()
        self.controller.cleanup()
        event.accept()
