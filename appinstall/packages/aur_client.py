"""
AUR RPC API Client - Fetch package metadata without an AUR helper
"""

import requests
import logging
from typing import Dict, Optional

from appinstall import config

logger = logging.getLogger(__name__)


class AURClient:
    """AUR RPC API client for looking up available AUR versions"""

    def __init__(self, base_url: str = config.AUR_RPC_URL, timeout: int = config.AUR_RPC_TIMEOUT):
        self.base_url = base_url
        self.timeout = timeout

    def get_package_info(self, package_name: str) -> Optional[Dict]:
        """
        Fetch package info from AUR RPC API

        Args:
            package_name: Package name

        Returns:
            Dictionary with package info or None if not found or unreachable
        """
        try:
            response = requests.get(
                self.base_url,
                params={'type': 'info', 'arg[]': package_name},
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            logger.warning(f"AUR RPC request failed for {package_name}: {e}")
            return None
        except ValueError as e:
            logger.warning(f"AUR RPC returned invalid JSON for {package_name}: {e}")
            return None

        if data.get("type") == "error":
            logger.warning(f"AUR RPC error for {package_name}: {data.get('error')}")
            return None

        for package_info in data.get("results", []):
            if package_info.get("Name") == package_name:
                logger.debug(f"Fetched AUR metadata for {package_name}: {package_info.get('Version')}")
                return package_info

        logger.warning(f"AUR package not found: {package_name}")
        return None

    def get_package_version(self, package_name: str) -> Optional[str]:
        """
        Get current version of an AUR package

        Args:
            package_name: Package name

        Returns:
            Version string or None
        """
        info = self.get_package_info(package_name)
        if info:
            return info.get("Version")
        return None
