"""Shared fixtures for prefbuild unit tests."""

from pathlib import Path
from typing import List, Optional, Tuple

import pytest

from prefbuild.build import CompilationError
from prefbuild.config import BuildSettings


class StubCompiler:
    """Stands in for BunCompiler and records every invocation."""

    def __init__(self, fail_targets=(), write_artifact: bool = True, size: int = 2048):
        self.fail_targets = set(fail_targets)
        self.write_artifact = write_artifact
        self.size = size
        self.calls: List[Tuple[Path, Optional[str], Path]] = []

    def compile(self, entry_point: Path, target: Optional[str], output_path: Path) -> Path:
        self.calls.append((entry_point, target, output_path))
        if target in self.fail_targets:
            raise CompilationError(f"Compiler exited with status 1 for {target}")
        if self.write_artifact:
            output_path.write_bytes(b"\0" * self.size)
        return output_path

    @property
    def targets(self) -> List[Optional[str]]:
        return [target for _, target, _ in self.calls]


@pytest.fixture
def settings(tmp_path):
    """Build settings writing under a temporary output root."""
    return BuildSettings(
        entry_point=tmp_path / "index.ts",
        output_root=tmp_path / "build",
        show_progress=False,
    )


@pytest.fixture
def stub_compiler():
    """Compiler stub that always succeeds."""
    return StubCompiler()


@pytest.fixture
def make_compiler():
    """Factory for compiler stubs with custom failures or artifacts."""
    return StubCompiler
