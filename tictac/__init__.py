"""
Tictac - Nested immutable state engine for tic-tac-toe.

The engine keeps every game as an immutable value and provides:
- Win detection
- Time-travel history (browse the past, fork on edit)
- Composable dispatchers (lenses) over a single authoritative store
- Many independent games behind one root state
"""

__version__ = "0.1.0"
