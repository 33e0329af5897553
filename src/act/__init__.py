"""Autonomous Coding Toolkit command dispatcher."""
