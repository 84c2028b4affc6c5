"""
K-Means Customer Segmentation Main Program

Animates Lloyd's algorithm over synthetic rental-store customers:
- Generates customers from three spending/rental segments
- Runs k-means one iteration at a time with a delay between frames
- Displays centroids per iteration, the final status and cluster statistics
"""

import signal
import sys
import threading
import time
from typing import Callable, Optional

from kmeans_viz.common.utils import configure_windows_stdio

# Fix encoding issues on Windows for interactive CLI runs only
configure_windows_stdio()

from colorama import Fore, init as colorama_init

from kmeans_viz.common.utils import (
    clamp_k,
    color_text,
    log_data,
    log_error,
    log_info,
    log_progress,
    log_success,
    log_warn,
)
from kmeans_viz.ProgressBar import IterationProgressBar
from kmeans_viz.lloyd.analysis.statistics import compute_cluster_statistics
from kmeans_viz.lloyd.cli import (
    parse_args,
    display_configuration,
    display_iteration,
    display_final_status,
    display_cluster_statistics,
    display_points,
)
from kmeans_viz.lloyd.core.driver import ClusteringConfig, KMeansDriver
from kmeans_viz.lloyd.core.models import ClusteringState
from kmeans_viz.lloyd.data.export import export_state_csv
from kmeans_viz.lloyd.utils.validation import ClusteringError

colorama_init(autoreset=True)


def build_clustering_config(args) -> ClusteringConfig:
    """Create ClusteringConfig from arguments, clamping k to the allowed range."""
    k = clamp_k(args.k)
    if k != args.k:
        log_warn(f"K={args.k} is out of range, using K={k}")
    return ClusteringConfig(
        k=k,
        max_iterations=args.max_iterations,
        threshold=args.threshold,
        report_max_iterations_as_converged=args.collapse_status,
        seed=args.seed,
    )


class KMeansAnimator:
    """
    K-Means animation orchestrator.

    Pulls snapshots from the driver, renders each one and paces the run.
    """

    def __init__(
        self,
        args,
        driver: KMeansDriver,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the animator.

        Args:
            args: Parsed command-line arguments
            driver: KMeansDriver in the IDLE state
            sleep: Delay function used between frames
        """
        self.args = args
        self.driver = driver
        self.sleep = sleep
        self._signal_handlers_registered = False

    def _handle_shutdown(self, signum, frame):
        """Handle shutdown signal."""
        if not self.driver.stop_requested:
            print(
                color_text(
                    "\nInterrupt received. Stopping after the current iteration...",
                    Fore.YELLOW,
                )
            )
            self.driver.stop()

    def install_signal_handlers(self):
        """Register OS signal handlers for graceful shutdown when running from CLI."""
        if self._signal_handlers_registered:
            return
        if threading.current_thread() is not threading.main_thread():
            raise RuntimeError(
                "Signal handlers can only be installed from the main thread."
            )
        signal.signal(signal.SIGINT, self._handle_shutdown)
        try:
            signal.signal(signal.SIGTERM, self._handle_shutdown)
        except AttributeError:
            # SIGTERM may not be available on some platforms (e.g., Windows)
            pass
        self._signal_handlers_registered = True

    def run(self) -> ClusteringState:
        """
        Run the clustering to a terminal state and return the last snapshot.

        Raises:
            ClusteringError: If the driver cannot be started.
        """
        animate = not self.args.no_animation
        progress: Optional[IterationProgressBar] = None
        if not animate:
            progress = IterationProgressBar(self.driver.config.max_iterations)

        log_progress("Initializing centroids...")
        last = self.driver.start()
        log_info(f"Running k-means with K={self.driver.k}")
        if animate:
            print(color_text("\nInitial centroids", Fore.CYAN))
            display_iteration(last)

        for state in self.driver.run():
            previous = last.centroids
            last = state
            if animate:
                display_iteration(state, previous)
                if not state.finished and self.args.delay > 0:
                    self.sleep(self.args.delay)
            else:
                progress.update(state.iteration_count)

        # A stop request leaves the driver in STOPPED without a new snapshot
        last = self.driver.snapshot()
        if progress is not None:
            progress.finish(last.status.value)
        return last

    def report(self, state: ClusteringState) -> None:
        """Display final status, statistics and optional extras."""
        display_final_status(state)
        display_cluster_statistics(compute_cluster_statistics(state))
        if self.args.show_points:
            display_points(state)
        if self.args.export:
            path = export_state_csv(state, self.args.export)
            log_success(f"Exported {len(state.points)} customers to {path}")


def main(argv=None) -> int:
    """
    Main function for k-means customer clustering.

    Orchestrates the complete workflow:
    1. Parse command-line arguments
    2. Generate customers and build the driver
    3. Animate the run
    4. Report results

    Returns:
        Process exit code
    """
    args = parse_args(argv)

    try:
        config = build_clustering_config(args)
    except ValueError as e:
        log_error(f"Invalid configuration: {e}")
        return 1

    log_progress("Generating customers...")
    driver = KMeansDriver(config)
    log_data(f"Generated {len(driver.points)} customers")
    display_configuration(config, len(driver.points), args.delay)

    animator = KMeansAnimator(args, driver)
    animator.install_signal_handlers()

    try:
        final_state = animator.run()
    except ClusteringError as e:
        log_error(f"Clustering failed: {e}")
        return 1

    animator.report(final_state)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print(color_text("\nExiting program by user request.", Fore.YELLOW))
        sys.exit(0)
    except Exception as e:
        log_error(f"Error: {type(e).__name__}: {e}")
        import traceback
        log_error(f"Traceback: {traceback.format_exc()}")
        sys.exit(1)
