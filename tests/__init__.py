"""
Tests Package.

This package contains test suites for validating anim_core, including unit
tests for the animation algebra, lifecycle queries and interruptions, and
tests for the description compiler, sampling helpers and CLI.
"""
