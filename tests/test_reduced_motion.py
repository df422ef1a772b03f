from motionicon.services.reduced_motion import (
    ReducedMotionSignal,
    SystemPreferenceObserver,
    get_system_preference_observer,
    reset_system_preference_observer,
    set_reduced_motion_source,
    use_reduced_motion,
)


class BrokenSource:
    def matches(self):
        raise RuntimeError("matchMedia unsupported")

    def add_listener(self, listener):
        raise RuntimeError("no change events")

    def remove_listener(self, listener):
        pass


def test_observer_attaches_on_first_subscriber_and_detaches_on_last():
    signal = ReducedMotionSignal(False)
    observer = SystemPreferenceObserver(signal)
    assert signal.listener_count == 0

    unsubscribe_a = observer.subscribe(lambda value: None)
    unsubscribe_b = observer.subscribe(lambda value: None)
    assert observer.attached
    assert signal.listener_count == 1
    assert observer.subscriber_count == 2

    unsubscribe_a()
    assert signal.listener_count == 1
    unsubscribe_b()
    assert not observer.attached
    assert signal.listener_count == 0


def test_subscribers_receive_changes():
    signal = ReducedMotionSignal(False)
    observer = SystemPreferenceObserver(signal)
    received = []
    observer.subscribe(received.append)

    signal.publish(True)
    signal.publish(True)
    signal.publish(False)

    assert received == [True, False]
    assert observer.reduced_motion is False


def test_unsubscribing_twice_is_harmless():
    observer = SystemPreferenceObserver(ReducedMotionSignal(False))
    callback = lambda value: None  # noqa: E731
    observer.unsubscribe(callback)
    unsubscribe = observer.subscribe(callback)
    unsubscribe()
    unsubscribe()
    assert observer.subscriber_count == 0


def test_failing_subscriber_does_not_block_others():
    signal = ReducedMotionSignal(False)
    observer = SystemPreferenceObserver(signal)
    received = []

    def broken(value):
        raise ValueError("bad subscriber")

    observer.subscribe(broken)
    observer.subscribe(received.append)
    signal.publish(True)

    assert received == [True]


def test_missing_host_signal_means_no_reduction():
    observer = SystemPreferenceObserver(None)
    assert observer.reduced_motion is False
    observer.subscribe(lambda value: None)
    assert observer.reduced_motion is False


def test_broken_host_signal_means_no_reduction():
    observer = SystemPreferenceObserver(BrokenSource())
    assert observer.reduced_motion is False
    observer.subscribe(lambda value: None)
    assert not observer.attached
    assert observer.reduced_motion is False


def test_reads_source_without_subscribers():
    signal = ReducedMotionSignal(True)
    observer = SystemPreferenceObserver(signal)
    assert observer.reduced_motion is True
    signal.publish(False)
    assert observer.reduced_motion is False


def test_process_wide_observer_is_a_singleton():
    assert get_system_preference_observer() is get_system_preference_observer()


def test_replacing_source_keeps_subscribers(reduced_signal):
    received = []
    observer = get_system_preference_observer()
    observer.subscribe(received.append)
    assert use_reduced_motion() is True

    new_signal = ReducedMotionSignal(False)
    assert set_reduced_motion_source(new_signal) is observer
    assert reduced_signal.listener_count == 0
    assert new_signal.listener_count == 1
    assert observer.subscriber_count == 1
    assert received == [False]

    new_signal.publish(True)
    assert received == [False, True]


def test_handle_from_before_source_swap_still_unsubscribes(reduced_signal):
    unsubscribe = get_system_preference_observer().subscribe(lambda value: None)
    new_signal = ReducedMotionSignal(False)
    observer = set_reduced_motion_source(new_signal)
    assert new_signal.listener_count == 1

    unsubscribe()
    assert observer.subscriber_count == 0
    assert not observer.attached
    assert new_signal.listener_count == 0
    assert reduced_signal.listener_count == 0


def test_swapping_source_without_subscribers_stays_detached():
    observer = get_system_preference_observer()
    signal = ReducedMotionSignal(True)
    set_reduced_motion_source(signal)
    assert not observer.attached
    assert signal.listener_count == 0
    assert use_reduced_motion() is True


def test_reset_detaches_listener(reduced_signal):
    get_system_preference_observer().subscribe(lambda value: None)
    assert reduced_signal.listener_count == 1
    reset_system_preference_observer()
    assert reduced_signal.listener_count == 0
