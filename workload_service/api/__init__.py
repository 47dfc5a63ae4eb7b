"""
HTTP layer for the workload service.

Turns the workloads into FastAPI routes; holds no workload logic of its own.
"""

from workload_service.api.app import create_app

__all__ = ["create_app"]
