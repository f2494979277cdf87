from __future__ import annotations

from typing import Iterator

import pytest


@pytest.fixture
def root() -> Iterator[object]:
    """Hidden Tk root; skips when no display is available."""
    tk = pytest.importorskip("tkinter")
    try:
        root = tk.Tk()
    except tk.TclError as exc:
        pytest.skip(f"Tk display unavailable: {exc}")
    root.withdraw()
    yield root
    root.destroy()
