"""Integration tests running local_fs inside a fresh interpreter."""

from __future__ import annotations

import os
import subprocess
import sys
import textwrap
from pathlib import Path

import pytest

import local_fs


def _run(script: str, cwd: Path) -> subprocess.CompletedProcess[str]:
    env = dict(os.environ)
    src = str(Path(local_fs.__file__).resolve().parents[1])
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [src, env.get("PYTHONPATH")]))
    for name in list(env):
        if name.startswith("LOCAL_FS_"):
            del env[name]
    return subprocess.run(
        [sys.executable, "-c", textwrap.dedent(script)],
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )


@pytest.mark.integration
class TestEmbedding:
    """The package behaves as a quiet library in a host program."""

    def test_unconfigured_logging_leaves_stdout_alone(self, temp_dir: Path) -> None:
        result = _run(
            """
            import local_fs
            local_fs.write("note.txt", "hi")
            assert not local_fs.remove_file("missing.txt")
            print(local_fs.read_string("note.txt"), end="")
            """,
            temp_dir,
        )

        assert result.returncode == 0, result.stderr
        assert result.stdout == "hi"
        assert "fs_operation_succeeded" not in result.stderr

    def test_metrics_enabled_after_adapter_in_use(self, temp_dir: Path) -> None:
        result = _run(
            """
            import socket

            from prometheus_client import REGISTRY

            import local_fs
            from local_fs.infrastructure import setup_observability
            from local_fs.infrastructure.config import Config, ObservabilityConfig
            from local_fs.infrastructure.metrics import get_metrics

            assert local_fs.write("note.txt", "hi")

            with socket.socket() as sock:
                sock.bind(("127.0.0.1", 0))
                port = sock.getsockname()[1]

            setup_observability(
                Config(observability=ObservabilityConfig(metrics_enabled=True, metrics_port=port))
            )

            assert get_metrics() is local_fs.get_default_adapter().backend._metrics
            assert local_fs.write("other.txt", "again")
            assert REGISTRY.get_sample_value(
                "fs_operations_total", {"operation": "write", "status": "success"}
            ) == 2.0
            print("ok", end="")
            """,
            temp_dir,
        )

        assert result.returncode == 0, result.stderr
        assert result.stdout == "ok"
