"""Configuration constants for manifestcheck."""

# Reference schema fetched once and cached locally
OPENAPI_URL = "https://raw.githubusercontent.com/kubernetes/kubernetes/master/api/openapi-spec/swagger.json"
CACHE_FILE = ".k8s_openapi_cache.json"

DOCUMENT_EXTENSION = ".yaml"

# Discriminator fields every manifest must expose before it is validated
API_VERSION_FIELD = "apiVersion"
KIND_FIELD = "kind"

# Stays well below the interpreter recursion limit
DEFAULT_MAX_DEPTH = 256

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_SETUP_FAILURE = 2

# Default configuration values
DEFAULT_CONFIG = {
    "schema_url": OPENAPI_URL,
    "cache_file": CACHE_FILE,
    "document_extension": DOCUMENT_EXTENSION,
    "fetch_timeout": None,
    "max_depth": DEFAULT_MAX_DEPTH,
    "sort_properties": False,
    "max_workers": None,
}
