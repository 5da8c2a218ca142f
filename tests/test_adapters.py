"""
Tests for the adapter layer — actions, the registry, the mock and the
Java launcher adapter.
"""

import os
from pathlib import Path

from lombok_wiring.adapters.base import ExecutionContext
from lombok_wiring.adapters.jvm.javaexec import JavaExecAdapter
from lombok_wiring.adapters.mock import MockAdapter
from lombok_wiring.adapters.registry import AdapterRegistry
from lombok_wiring.core.models.action import Action, Receipt


def _context(adapter: str = "mock", action_id: str = "a-1", root: str = ".", **params):
    return ExecutionContext(
        action=Action(id=action_id, adapter=adapter, params=params),
        project_root=root,
    )


# ── Actions ─────────────────────────────────────────────────────────


class TestAction:
    def test_javaexec_action(self):
        action = Action.javaexec("lombok.launch.Main", ["config", Path("/src")], ["/l.jar"])
        assert action.adapter == "javaexec"
        assert action.id.startswith("javaexec-")
        assert action.params == {
            "main_class": "lombok.launch.Main",
            "classpath": ["/l.jar"],
            "args": ["config", "/src"],
        }

    def test_unique_ids(self):
        assert Action.javaexec("M", []).id != Action.javaexec("M", []).id

    def test_receipts(self):
        ok = Receipt.success("javaexec", "a-1", "out", exit_code=0)
        failed = Receipt.failure("javaexec", "a-1", "boom")
        assert ok.ok and not ok.failed
        assert failed.failed and failed.error == "boom"
        assert failed.exit_code is None

    def test_working_dir(self):
        assert _context(root="/project").working_dir == "/project"
        assert _context(root="/project", cwd="/elsewhere").working_dir == "/elsewhere"


# ── Mock ────────────────────────────────────────────────────────────


class TestMockAdapter:
    def test_records_calls(self):
        mock = MockAdapter()
        receipt = mock.execute(_context())
        assert receipt.ok
        assert receipt.output == "[mock] executed"
        assert mock.call_count == 1

    def test_pinned_receipts(self):
        mock = MockAdapter()
        mock.set_response("a-1", Receipt.success("mock", "a-1", output="pinned"))
        mock.set_failure("a-2", error="Intentional failure")
        assert mock.execute(_context(action_id="a-1")).output == "pinned"
        assert mock.execute(_context(action_id="a-2")).error == "Intentional failure"

    def test_responder(self):
        mock = MockAdapter(responder=lambda ctx: f"echo {ctx.param('word')}")
        assert mock.execute(_context(word="hi")).output == "echo hi"

    def test_reset(self):
        mock = MockAdapter()
        mock.set_failure("a-1")
        mock.execute(_context())
        mock.reset()
        assert mock.call_count == 0
        assert mock.execute(_context()).ok


# ── Registry ────────────────────────────────────────────────────────


class TestAdapterRegistry:
    def test_lookup(self):
        mock = MockAdapter(adapter_name="javaexec")
        registry = AdapterRegistry(mock)
        assert registry.get("javaexec") is mock
        assert registry.list_adapters() == ["javaexec"]
        registry.unregister("javaexec")
        assert registry.get("javaexec") is None

    def test_status(self):
        registry = AdapterRegistry(
            MockAdapter(adapter_name="up", available=True),
            MockAdapter(adapter_name="down", available=False),
        )
        status = registry.adapter_status()
        assert status["up"]["available"] is True
        assert status["down"]["available"] is False
        assert status["up"]["type"] == "MockAdapter"

    def test_unknown_adapter(self):
        receipt = AdapterRegistry().execute_action(Action(id="a-1", adapter="javaexec"))
        assert receipt.failed
        assert "No adapter registered for 'javaexec'" in receipt.error

    def test_dispatch_passes_project_root(self):
        mock = MockAdapter()
        receipt = AdapterRegistry(mock).execute_action(Action(id="a-1", adapter="mock"), "/p")
        assert receipt.ok
        assert receipt.duration_ms >= 0
        assert mock.call_log[0].project_root == "/p"

    def test_validation_failure(self, tmp_path: Path):
        registry = AdapterRegistry(JavaExecAdapter())
        receipt = registry.execute_action(Action(id="a-1", adapter="javaexec"), str(tmp_path))
        assert receipt.failed
        assert receipt.error.startswith("Validation failed")

    def test_raising_adapter(self):
        class BrokenAdapter(MockAdapter):
            def execute(self, context):
                raise RuntimeError("kaput")

        receipt = AdapterRegistry(BrokenAdapter()).execute_action(Action(id="a-1", adapter="mock"))
        assert receipt.failed
        assert "kaput" in receipt.error


# ── Java launcher ───────────────────────────────────────────────────


class TestJavaExecAdapter:
    def test_availability(self):
        assert JavaExecAdapter().name == "javaexec"
        assert not JavaExecAdapter(java="no-such-java-launcher").is_available()

    def test_validate(self, tmp_path: Path):
        adapter = JavaExecAdapter()
        valid, message = adapter.validate(_context("javaexec", root=str(tmp_path), args=[]))
        assert not valid and "main_class" in message

        valid, message = adapter.validate(
            _context("javaexec", root=str(tmp_path), main_class="Main", args="config")
        )
        assert not valid and "must be a list" in message

        valid, message = adapter.validate(
            _context("javaexec", main_class="Main", cwd=str(tmp_path / "missing"))
        )
        assert not valid and "does not exist" in message

    def test_command_line(self):
        ctx = _context(
            "javaexec",
            main_class="lombok.launch.Main",
            classpath=["/a.jar", "/b.jar"],
            args=["config", "/src"],
        )
        assert JavaExecAdapter(java="/opt/java").command_line(ctx) == [
            "/opt/java",
            "-cp",
            os.pathsep.join(["/a.jar", "/b.jar"]),
            "lombok.launch.Main",
            "config",
            "/src",
        ]

    def test_command_line_without_classpath(self):
        ctx = _context("javaexec", main_class="Main", args=[])
        assert JavaExecAdapter().command_line(ctx) == ["java", "Main"]

    def test_launch_failure(self, tmp_path: Path):
        ctx = _context("javaexec", root=str(tmp_path), main_class="Main", args=[])
        receipt = JavaExecAdapter(java="no-such-java-launcher").execute(ctx)
        assert receipt.failed
        assert "Cannot launch no-such-java-launcher" in receipt.error
        assert receipt.command[0] == "no-such-java-launcher"
