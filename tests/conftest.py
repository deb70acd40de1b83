import ast
import subprocess

import pytest

from focus_guard.config import Config


class FakeRunner:
    """Stands in for subprocess.run and records every command line."""

    def __init__(self, returncode=0, stdout="", stderr=""):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.calls = []

    def __call__(self, args, **kwargs):
        self.calls.append(list(args))
        return subprocess.CompletedProcess(args, self.returncode, stdout=self.stdout, stderr=self.stderr)


def make_prompt(*answers):
    it = iter(answers)
    return lambda _message: next(it)


def baked_environ(script_text):
    """Return the ENVIRON mapping assigned in a generated monitor script."""
    for node in ast.parse(script_text).body:
        if isinstance(node, ast.Assign) and node.targets[0].id == "ENVIRON":
            return ast.literal_eval(node.value)
    raise AssertionError("no ENVIRON in monitor script")


@pytest.fixture
def controller(tmp_path):
    path = tmp_path / "controller.py"
    path.write_text("# controller\n")
    path.chmod(0o644)
    return path


@pytest.fixture
def config(tmp_path, controller):
    env = {
        "FOCUS_GUARD_HOME": str(tmp_path / "home"),
        "FOCUS_GUARD_LAUNCH_AGENTS_DIR": str(tmp_path / "LaunchAgents"),
        "FOCUS_GUARD_LABEL": "com.tester.focusguard",
        "FOCUS_GUARD_CONTROLLER": str(controller),
    }
    return Config(environ=env)


@pytest.fixture
def runner():
    return FakeRunner()
