"""Kanary Operator: status conditions and report for KanaryDeployment resources."""

__version__ = "0.1.0"
