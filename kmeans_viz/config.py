"""
Configuration constants for all components.

Organized by component:
1. Clustering Configuration
2. Synthetic Customer Data Configuration
3. Presentation Configuration
"""

# ============================================================================
# CLUSTERING CONFIGURATION
# ============================================================================

# Number of clusters
DEFAULT_K = 3
K_MIN = 2  # Lower bound accepted by the command line (values are clamped)
K_MAX = 5  # Upper bound accepted by the command line (values are clamped)

# Lloyd iteration settings
DEFAULT_MAX_ITERATIONS = 50
DEFAULT_CONVERGENCE_THRESHOLD = 0.1  # Max centroid movement still counted as converged

# Cluster index carried by points that have not been through an assignment step
UNASSIGNED_CLUSTER = -1


# ============================================================================
# SYNTHETIC CUSTOMER DATA CONFIGURATION
# ============================================================================

# Customer segments: blob centers in (rentals, spending) space
CUSTOMER_SEGMENTS = [
    {"rentals": 5.0, "spending": 50.0, "count": 20},
    {"rentals": 15.0, "spending": 150.0, "count": 20},
    {"rentals": 25.0, "spending": 300.0, "count": 20},
]
RENTALS_NOISE = 4.0  # Uniform noise half-width for total rentals
SPENDING_NOISE = 40.0  # Uniform noise half-width for total spending
FIRST_CUSTOMER_ID = 1

# Activity labels by average rentals in a cluster
LOW_ACTIVITY_MAX_RENTALS = 10.0  # Below this = low activity
MEDIUM_ACTIVITY_MAX_RENTALS = 20.0  # Below this = medium activity, otherwise high
ACTIVITY_LABELS = ["Low Activity", "Medium Activity", "High Activity"]


# ============================================================================
# PRESENTATION CONFIGURATION
# ============================================================================

DEFAULT_STEP_DELAY = 0.5  # Pause between rendered iterations (seconds)

# Display colors per cluster index (matches the chart palette)
CLUSTER_COLORS = ["blue", "red", "green", "yellow", "magenta"]
