"""
ABI Provider

Loads parsed contract ABIs for the relayer registry, the lending registry
and ERC20-like tokens. Bundled ABI files ship with the package; any of them
can be replaced by a file path from configuration.
"""

import copy
import json
import logging
import threading
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..errors import AbiUnavailableError

logger = logging.getLogger(__name__)

ParsedAbi = List[Dict[str, Any]]

BUNDLED_ABI_DIR = Path(__file__).parent


class AbiName(Enum):
    """Well-known ABIs"""
    RELAYER_REGISTRY = "relayer_registry"
    LENDING_REGISTRY = "lending_registry"
    TOKEN = "token"

    @property
    def bundled_path(self) -> Path:
        return BUNDLED_ABI_DIR / f"{self.value}.json"


class AbiProvider:
    """
    Resolves and caches parsed ABIs

    Usage:
        provider = AbiProvider()
        relayer_abi = provider.get_abi(AbiName.RELAYER_REGISTRY)
        token_abi = provider.get_abi_from_path("/path/to/ERC20.json")
    """

    def __init__(self, overrides: Optional[Dict[AbiName, str]] = None):
        """
        Initialize provider

        Args:
            overrides: Optional mapping of ABI name to file path
        """
        self._overrides = {
            name: path for name, path in (overrides or {}).items() if path
        }
        self._cache: Dict[str, ParsedAbi] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, abi_config=None) -> "AbiProvider":
        """Build provider from AbiConfig (global config if None)"""
        if abi_config is None:
            from ..config import config
            abi_config = config.abi
        return cls({
            AbiName.RELAYER_REGISTRY: abi_config.relayer_abi_path,
            AbiName.LENDING_REGISTRY: abi_config.lending_abi_path,
            AbiName.TOKEN: abi_config.token_abi_path,
        })

    def get_abi(self, name: Union[AbiName, str]) -> ParsedAbi:
        """
        Get ABI by well-known identifier

        Args:
            name: AbiName or its string value ("relayer_registry", ...)

        Returns:
            Parsed ABI (list of ABI entries)

        Raises:
            AbiUnavailableError: Unknown identifier or unreadable ABI
        """
        if not isinstance(name, AbiName):
            try:
                name = AbiName(name)
            except ValueError:
                raise AbiUnavailableError.not_found(str(name))

        path = self._overrides.get(name) or name.bundled_path
        return self.get_abi_from_path(path)

    def get_abi_from_path(self, path: Union[str, Path]) -> ParsedAbi:
        """
        Load ABI from a JSON file

        Accepts either a bare ABI array or a compiler artifact with an "abi" key.
        Each call returns its own copy; the file is read once until
        clear_cache().

        Raises:
            AbiUnavailableError: File missing, unreadable or not an ABI
        """
        key = str(Path(path).resolve())
        with self._lock:
            cached = self._cache.get(key)
        if cached is None:
            cached = _parse_abi_file(Path(path))
            with self._lock:
                self._cache[key] = cached
            logger.debug(f"Loaded ABI from {path} ({len(cached)} entries)")
        return copy.deepcopy(cached)

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()


def _parse_abi_file(path: Path) -> ParsedAbi:
    source = str(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise AbiUnavailableError.not_found(source, e)
    except json.JSONDecodeError as e:
        raise AbiUnavailableError.invalid(source, f"invalid JSON ({e.msg})", e)

    if isinstance(data, dict) and "abi" in data:
        data = data["abi"]

    if not isinstance(data, list) or not all(isinstance(entry, dict) for entry in data):
        raise AbiUnavailableError.invalid(source, "expected a list of ABI entries")

    return data
