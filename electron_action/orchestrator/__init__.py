"""
Build orchestration
"""
from .build_orchestrator import BuildOrchestrator

__all__ = ['BuildOrchestrator']
