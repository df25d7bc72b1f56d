# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core infrastructure for kgadget.

This module collects the foundational classes and helpers used across the
kgadget codebase: configuration, structured logging, error types and handlers,
per-item error tracking, and help formatting of the commands.
"""
