"""HTTP and command-line front ends for the ShakeSearch engine."""
from __future__ import annotations
from .web import create_app

__all__ = ["create_app"]
