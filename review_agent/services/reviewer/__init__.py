"""Reviewer service: diff context, per-file critique, orchestration, write-back."""
