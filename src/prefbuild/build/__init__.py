"""
Build system components for prefbuild.

This module provides:
- Output directory management
- Compiler invocation (bun build --compile)
- Single-platform builds
- Build orchestration across the platform matrix
"""

from .build_dir import ensure_build_dir
from .build_utils import format_size
from .builder import BuildOutcome, SinglePlatformBuilder
from .compiler import BunCompiler, CompilationError
from .orchestrator import BuildOrchestrator, RunSummary

__all__ = [
    "BuildOrchestrator",
    "BuildOutcome",
    "BunCompiler",
    "CompilationError",
    "RunSummary",
    "SinglePlatformBuilder",
    "ensure_build_dir",
    "format_size",
]
