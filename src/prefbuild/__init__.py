"""prefbuild - cross-platform build orchestrator for pref-doctor."""

__version__ = "1.0.0"
