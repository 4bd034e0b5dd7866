"""
Configuration file for the Manjaro application installer
=================================================================================
PURPOSE: Centralized configuration for the per-app install units and the
         batch runner. These are defaults; environment variables read by
         ConfigLoader can override some of them.

ORGANIZATION:
1. AUR helper configuration
2. Unit discovery
3. AUR RPC access
4. Application catalogue
"""

# ==============================================================================
# 1. AUR HELPER CONFIGURATION
# ==============================================================================

# AUR_HELPERS: Helpers probed on PATH, in priority order.
# The first one found is used for every AUR query and install.
AUR_HELPERS = ["yay", "paru"]

# DEFAULT_AUR_HELPER: Helper offered for automatic installation when none found
DEFAULT_AUR_HELPER = "yay"

# HELPER_BUILD_URL: Build recipe cloned when installing the default helper
HELPER_BUILD_URL = "https://aur.archlinux.org/yay.git"

# HELPER_PREREQUISITES: (package, probe) pairs needed before building the helper.
# "command" means the package provides an executable of the same name,
# "package" means the package must be known to the local pacman database.
HELPER_PREREQUISITES = [
    ("git", "command"),
    ("base-devel", "package"),
]

# ==============================================================================
# 2. UNIT DISCOVERY
# ==============================================================================

# UNIT_SUFFIX: File name suffix (extension removed) marking an install unit
UNIT_SUFFIX = "-install"

# ORCHESTRATOR_NAME: The batch runner's own file name (extension removed).
# Never executed as a unit, even if it matches the naming convention.
ORCHESTRATOR_NAME = "install-all"

# ==============================================================================
# 3. AUR RPC ACCESS
# ==============================================================================

AUR_RPC_URL = "https://aur.archlinux.org/rpc/?v=5"
AUR_RPC_TIMEOUT = 30  # seconds, per request

# AUR_QUERY_MODES: How available versions of AUR packages are looked up.
# "helper" runs '<helper> -Si', "rpc" asks the AUR RPC interface directly.
AUR_QUERY_MODES = ("helper", "rpc")
DEFAULT_AUR_QUERY = "helper"

# ==============================================================================
# 4. APPLICATION CATALOGUE
# ==============================================================================

# CATALOG_FILE: YAML file, next to this module, describing every application
CATALOG_FILE = "apps.yaml"
