from foodgrid.app.fsm import RunState, RunStateMachine


def test_initial_state_is_idle():
    fsm = RunStateMachine()
    assert fsm.is_idle()
    assert fsm.get_state_description() == "Ready"


def test_pause_and_resume():
    fsm = RunStateMachine()
    assert fsm.start()
    assert fsm.is_running()
    assert fsm.pause()
    assert fsm.is_paused()
    assert fsm.resume()
    assert fsm.is_running()


def test_toggle_pause():
    fsm = RunStateMachine()
    fsm.start()
    assert fsm.toggle_pause()
    assert fsm.is_paused()
    assert fsm.toggle_pause()
    assert fsm.is_running()


def test_invalid_transitions_rejected():
    fsm = RunStateMachine()
    assert not fsm.pause()
    assert not fsm.resume()
    assert fsm.is_idle()

    fsm.start()
    fsm.stop()
    assert fsm.is_stopped()
    assert not fsm.start()
    assert not fsm.toggle_pause()
    assert fsm.current_state == RunState.STOPPED


def test_enter_callbacks_receive_context():
    fsm = RunStateMachine()
    entered = []
    fsm.on_state_enter(RunState.PAUSED, lambda context: entered.append(context))

    fsm.start()
    fsm.pause({"reason": "key"})

    assert entered == [{"reason": "key"}]
