"""
Progress bar utility for displaying clustering iterations.
"""
import threading
from colorama import Fore
from .common.utils import color_text


class IterationProgressBar:
    """
    Thread-safe progress bar tracking Lloyd iterations against the iteration cap.

    Args:
        max_iterations: Iteration cap of the run
        label: Label to display before the progress bar
        width: Width of the progress bar in characters
    """
    def __init__(self, max_iterations: int, label: str = "Iterations", width: int = 30):
        self.total = max(max_iterations, 1)
        self.label = label
        self.width = width
        self.current = 0
        self.status = ""
        self._lock = threading.Lock()

    def render(self) -> str:
        """Return the current bar as plain (uncolored) text."""
        ratio = self.current / self.total
        filled = int(self.width * ratio)
        bar = "█" * filled + "-" * (self.width - filled)
        text = f"{self.label}: [{bar}] {self.current}/{self.total}"
        if self.status:
            text += f" {self.status}"
        return text

    def update(self, iteration_count: int, status: str = ""):
        """
        Move the bar to the given iteration count.

        Args:
            iteration_count: Iterations completed so far
            status: Optional short status shown after the counter
        """
        with self._lock:
            self.current = min(self.total, max(0, iteration_count))
            self.status = status
            print(f"\r{color_text(self.render(), Fore.CYAN)}", end='', flush=True)

    def finish(self, status: str = ""):
        """Redraw with the final status and print a newline."""
        self.update(self.current, status or self.status)
        print()
