"""
Config Loader Module - Handles configuration loading and validation
"""

import os
import logging
from pathlib import Path

from appinstall import config
from appinstall.common.errors import EnvironmentCheckError

logger = logging.getLogger(__name__)

TRUE_VALUES = ('1', 'true', 'yes', 'on')


class ConfigLoader:
    """Handles configuration loading from environment variables"""

    @staticmethod
    def get_default_units_dir() -> Path:
        """Directory holding the bundled *-install units"""
        return Path(__file__).resolve().parent.parent / 'units'

    @staticmethod
    def load_environment_config(environ=None):
        """
        Load configuration from environment variables.

        Recognised variables:
            APPINSTALL_DEBUG      - "true" enables debug logging
            APPINSTALL_LOG_FILE   - also append log records to this file
            APPINSTALL_UNITS_DIR  - directory scanned by the batch runner
            APPINSTALL_AUR_QUERY  - "helper" (default) or "rpc"

        Raises:
            EnvironmentCheckError: if APPINSTALL_AUR_QUERY holds an unknown mode
        """
        if environ is None:
            environ = os.environ

        aur_query = environ.get('APPINSTALL_AUR_QUERY', config.DEFAULT_AUR_QUERY).strip().lower()
        if aur_query not in config.AUR_QUERY_MODES:
            raise EnvironmentCheckError(
                f"Invalid APPINSTALL_AUR_QUERY '{aur_query}'. "
                f"Expected one of: {', '.join(config.AUR_QUERY_MODES)}"
            )

        units_dir = environ.get('APPINSTALL_UNITS_DIR')

        return {
            'debug_mode': environ.get('APPINSTALL_DEBUG', 'false').strip().lower() in TRUE_VALUES,
            'log_file': environ.get('APPINSTALL_LOG_FILE') or None,
            'units_dir': Path(units_dir) if units_dir else None,
            'aur_query': aur_query,
        }
