"""
Core module for shared domain infrastructure.

This module contains:
- Domain events and exceptions
- Licensing settings access
- Metrics, tracing and middleware
"""
