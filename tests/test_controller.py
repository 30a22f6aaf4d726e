import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtCore = pytest.importorskip("PySide6.QtCore")

from foodgrid.app.controller import SimulationController
from foodgrid.app.fsm import RunState
from foodgrid.app.simulation import Simulation
from foodgrid.domain.board import Board
from foodgrid.domain.qlearning import QLearningAgent
from foodgrid.utils.rng import SeededRNG


@pytest.fixture(scope="module")
def qt_app():
    return QtCore.QCoreApplication.instance() or QtCore.QCoreApplication([])


def make_controller(max_ticks=None):
    rng = SeededRNG(6)
    simulation = Simulation(Board(rng=rng), QLearningAgent(rng=rng))
    return SimulationController(simulation, delay_ms=1000, max_ticks=max_ticks)


def test_pause_before_start_is_rejected(qt_app):
    controller = make_controller()
    assert not controller.pause()
    assert controller.current_state == RunState.IDLE
    assert not controller._timer.isActive()


def test_pause_step_resume(qt_app):
    controller = make_controller()
    states = []
    ticks = []
    controller.state_changed.connect(states.append)
    controller.tick_completed.connect(ticks.append)

    assert controller.start()
    assert controller._timer.isActive()
    assert not controller.step()  # Stepping only works while paused

    assert controller.pause()
    assert not controller._timer.isActive()
    assert controller.step()
    assert controller.step()
    assert [result.tick for result in ticks] == [1, 2]

    assert controller.resume()
    assert controller._timer.isActive()
    assert states == [RunState.RUNNING, RunState.PAUSED, RunState.RUNNING]

    controller.stop()
    assert not controller._timer.isActive()
    assert not controller.pause()


def test_zero_tick_limit_never_starts(qt_app):
    controller = make_controller(max_ticks=0)
    assert not controller.start()
    assert controller.current_state == RunState.IDLE
    assert controller.simulation.ticks == 0


def test_tick_limit_stops_controller(qt_app):
    controller = make_controller(max_ticks=2)
    controller.start()
    controller.pause()
    controller.step()
    assert controller.current_state == RunState.PAUSED
    controller.step()
    assert controller.current_state == RunState.STOPPED
    assert not controller.step()
    assert controller.simulation.ticks == 2
    assert controller.get_statistics()["ticks"] == 2
