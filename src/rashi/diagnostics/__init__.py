"""Diagnostics (optional). Install extras with: pip install "rashi[diagnostics]"."""
