"""
CLI Command Modules

Each module contains a logical group of related commands; main.py
registers them on the top-level app.
"""

from termedit.cli import reading, editing

__all__ = ['reading', 'editing']
