"""Core orchestration for zed-devcontainer.

Submodules are imported directly (``from zed_devcontainer.core.orchestrator
import DevcontainerOrchestrator``) because the service layer depends on
``core.constants``.
"""
