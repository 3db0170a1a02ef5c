"""Constants and default values for the Kanary Operator."""

# CRD identifiers
API_GROUP = "kanary.k8s-operators.dev"
API_VERSION = "v1alpha1"
PLURAL = "kanarydeployments"
SINGULAR = "kanarydeployment"
KIND = "KanaryDeployment"

# Report values
REPORT_STATUS_SUCCEEDED = "Succeeded"
REPORT_STATUS_FAILED = "Failed"
REPORT_STATUS_RUNNING = "Running"

REPORT_VALIDATION_LABEL_WATCH = "labelWatch"
REPORT_VALIDATION_PROMQL = "promQL"
REPORT_VALIDATION_MANUAL = "manual"
REPORT_VALIDATION_UNKNOWN = "unknown"

REPORT_SCALE_STATIC = "static"
REPORT_SCALE_HPA = "hpa"

# Traffic sources
TRAFFIC_SOURCE_NONE = "none"
TRAFFIC_SOURCE_SERVICE = "service"
TRAFFIC_SOURCE_KANARY_SERVICE = "kanary-service"
TRAFFIC_SOURCE_BOTH = "both"
TRAFFIC_SOURCE_MIRROR = "mirror"
VALID_TRAFFIC_SOURCES = [
    TRAFFIC_SOURCE_NONE,
    TRAFFIC_SOURCE_SERVICE,
    TRAFFIC_SOURCE_KANARY_SERVICE,
    TRAFFIC_SOURCE_BOTH,
    TRAFFIC_SOURCE_MIRROR,
]

# Default values
DEFAULT_TRAFFIC_SOURCE = TRAFFIC_SOURCE_NONE
DEFAULT_STATIC_REPLICAS = 1
DEFAULT_INITIAL_DELAY = "0s"
DEFAULT_VALIDATION_PERIOD = "15m"
DEFAULT_MAX_INTERVAL_PERIOD = "20s"

# Operator behaviour
MONITOR_INTERVAL = 30
MONITOR_INITIAL_DELAY = 10
STATUS_UPDATE_RETRY_DELAY = 5
STATUS_UPDATE_TIMEOUT = 10
