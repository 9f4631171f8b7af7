"""Shared utilities for checker-options."""
