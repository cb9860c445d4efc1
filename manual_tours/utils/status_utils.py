# manual_tours/utils/status_utils.py
"""
Single-line progress status for long-running loops (notebook or terminal).
"""

from __future__ import annotations

import numpy as np

__all__ = ["_status", "_status_clear", "_maybe_status", "_maybe_clear", "_auto_every", "_frame_progress"]


def _status(msg: str) -> None:
    try:
        from IPython.display import clear_output
    except ImportError:
        # plain terminal: overwrite the current line
        print("\r" + msg.ljust(80), end="", flush=True)
        return
    clear_output(wait=True)
    print(msg)


def _status_clear() -> None:
    try:
        from IPython.display import clear_output
    except ImportError:
        print("\r" + (" " * 80), end="\r", flush=True)
        return
    clear_output(wait=True)


def _maybe_status(progress: bool, msg: str) -> None:
    if progress:
        _status(msg)


def _maybe_clear(progress: bool) -> None:
    if progress:
        _status_clear()


def _auto_every(n: int, *, target_updates: int = 25, min_every: int = 1) -> int:
    """
    Choose an update frequency that doesn't spam clear_output in notebooks.
    """
    n = int(n)
    if n <= 0:
        return 1
    every = max(int(min_every), int(np.ceil(n / max(1, int(target_updates)))))
    return max(1, every)


def _frame_progress(what: str, i: int, n_frames: int) -> str:
    """Format e.g. 'Projecting data: frame 12/40 (30%)' for 0-based i."""
    done = int(i) + 1
    pct = int(round(100.0 * done / max(1, int(n_frames))))
    return f"{what}: frame {done}/{int(n_frames)} ({pct}%)"
