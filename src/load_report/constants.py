"""Constants for the load-test report generator."""


class ReportConstants:
    """Centralized constants for report generation."""
    NANOSECONDS_PER_MILLISECOND = 1e6
    P99 = 99
    SUCCESS_STATUS_MIN = 200
    SUCCESS_STATUS_MAX = 300  # exclusive

    # Chart files
    LINE_CHART_FILENAME = "latencies_over_request_counter.png"
    SUCCESS_RATE_FILENAME = "success_rate.png"
    P99_LATENCY_FILENAME = "p99_latency.png"
    AVG_LATENCY_FILENAME = "avg_latency.png"
    MIN_LATENCY_FILENAME = "min_latency.png"
    MAX_LATENCY_FILENAME = "max_latency.png"
    BAR_CHART_FILENAMES = (SUCCESS_RATE_FILENAME, P99_LATENCY_FILENAME, AVG_LATENCY_FILENAME,
                           MIN_LATENCY_FILENAME, MAX_LATENCY_FILENAME)

    # Chart geometry, inches
    LINE_CHART_SIZE = (8, 4)
    BAR_CHART_SIZE = (4, 4)
    BAR_WIDTH = 0.35
    BAR_GAP = 0.15

    # Canvas geometry, pixels
    CANVAS_SPACE = 10
    CANVAS_TITLE_HEIGHT = 40
    CANVAS_LINE_WIDTH = 2
    CANVAS_TITLE_TOP_PADDING = 20
    CANVAS_BACKGROUND = (255, 255, 255)
    CANVAS_FOREGROUND = (0, 0, 0)

    USAGE = "Usage: {prog} <system_a_metrics> <system_b_metrics> <title>"
