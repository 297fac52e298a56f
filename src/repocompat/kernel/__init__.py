"""Compatibility kernel: versions, verdicts, tables and the repo map."""
