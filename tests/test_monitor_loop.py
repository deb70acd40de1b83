import pytest

from focus_guard.logging_setup import setup_logging
from focus_guard.monitor import MonitorLoop, MonitorState, Target
from focus_guard.monitor.relaunch import Relauncher


class FakeRelauncher(Relauncher):
    strategy_name = "fake"

    def __init__(self, result=True, error=None):
        super().__init__(executor=object())
        self.result = result
        self.error = error
        self.launched = []

    def build_script(self, app_name):
        return ""

    def launch(self, app_name):
        self.launched.append(app_name)
        if self.error:
            raise self.error
        return self.result


class FakeNotifier:
    def __init__(self):
        self.messages = []

    def notify(self, message):
        self.messages.append(message)
        return True


@pytest.fixture
def sleeps():
    return []


def make_loop(targets, sleeps, running=(), **kwargs):
    notifier = FakeNotifier()
    loop = MonitorLoop(
        targets,
        notifier=notifier,
        is_running=lambda name: name in running,
        sleep=sleeps.append,
        **kwargs
    )
    return loop, notifier


def test_running_targets_are_left_alone(sleeps):
    relauncher = FakeRelauncher()
    loop, _ = make_loop([Target("Forest", relauncher)], sleeps, running={"Forest"})

    assert loop.step() is MonitorState.ACTIVE

    assert relauncher.launched == []
    assert loop.iteration == 1
    assert sleeps == [1.0]


def test_missing_target_is_relaunched_every_iteration(sleeps):
    relauncher = FakeRelauncher()
    loop, _ = make_loop([Target("Forest", relauncher)], sleeps)

    loop.run(max_iterations=3)

    assert relauncher.launched == ["Forest", "Forest", "Forest"]


def test_pause_after_exactly_1200_iterations(sleeps):
    loop, notifier = make_loop([Target("Forest", FakeRelauncher())], sleeps, running={"Forest"})

    for _ in range(1199):
        loop.step()
    assert loop.iteration == 1199
    assert loop.pause_count == 0
    assert notifier.messages == []

    loop.step()

    assert loop.pause_count == 1
    assert len(notifier.messages) == 1
    assert loop.iteration == 0
    assert loop.state is MonitorState.ACTIVE
    # pause, then the regular interval
    assert sleeps[-2:] == [60.0, 1.0]

    loop.step()
    assert loop.iteration == 1
    assert len(notifier.messages) == 1


def test_one_notification_per_cycle(sleeps):
    loop, notifier = make_loop([], sleeps)

    loop.run(max_iterations=2400)

    assert loop.pause_count == 2
    assert len(notifier.messages) == 2
    assert sleeps.count(60.0) == 2


def test_custom_pacing(sleeps):
    loop, notifier = make_loop([], sleeps, check_interval=0.5, pause_threshold=3, pause_seconds=5)

    loop.run(max_iterations=3)

    assert sleeps == [0.5, 0.5, 5, 0.5]
    assert notifier.messages == ["Focus check paused for 5 seconds."]


def test_relaunch_error_does_not_block_other_target(sleeps):
    broken = FakeRelauncher(error=RuntimeError("osascript exploded"))
    healthy = FakeRelauncher()
    loop, _ = make_loop([Target("Forest", broken), Target("Focus", healthy)], sleeps)

    assert loop.step() is MonitorState.ACTIVE

    assert broken.launched == ["Forest"]
    assert healthy.launched == ["Focus"]
    assert sleeps == [1.0]


def test_liveness_error_does_not_block_other_target(sleeps):
    healthy = FakeRelauncher()

    def is_running(name):
        if name == "Forest":
            raise OSError("process table unavailable")
        return False

    loop = MonitorLoop(
        [Target("Forest", FakeRelauncher()), Target("Focus", healthy)],
        notifier=FakeNotifier(),
        is_running=is_running,
        sleep=sleeps.append,
    )
    loop.step()

    assert healthy.launched == ["Focus"]


def test_failures_are_logged(tmp_path, sleeps):
    log_file = tmp_path / "guard.log"
    setup_logging(log_file)
    loop, _ = make_loop(
        [Target("Forest", FakeRelauncher(result=False)),
         Target("Focus", FakeRelauncher(error=RuntimeError("boom")))],
        sleeps,
    )

    loop.step()

    text = log_file.read_text()
    assert "[ERROR] Failed to relaunch Forest" in text
    assert "[ERROR] Error while checking Focus: boom" in text
