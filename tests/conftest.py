import pytest

from motionicon.services import reduced_motion


@pytest.fixture(autouse=True)
def fresh_reduced_motion_observer():
    """Each test starts without a process-wide observer."""
    reduced_motion.reset_system_preference_observer()
    reduced_motion.set_reduced_motion_source(reduced_motion.ReducedMotionSignal(False))
    yield
    reduced_motion.reset_system_preference_observer()


@pytest.fixture
def reduced_signal():
    """Install a host signal that currently requests reduced motion."""
    signal = reduced_motion.ReducedMotionSignal(True)
    reduced_motion.set_reduced_motion_source(signal)
    return signal
