################################################################################
# File Name: manufacturer.py
# Purpose/Description: World Manufacturer Identifier lookup with lazy table load
# Author: Michael Cornelison
# Creation Date: 2026-10-12
# Copyright: (c) 2026 VIN Codec Project. All rights reserved.
#
# Modification History:
# ================================================================================
# Date          | Author       | Description
# ================================================================================
# 2026-10-12    | M. Cornelison | Initial implementation
# 2026-10-15    | M. Cornelison | Load failures raise instead of returning empty table
# ================================================================================
################################################################################

"""
Manufacturer resolution module.

Resolves the World Manufacturer Identifier (first three VIN characters) to a
manufacturer name using reference data loaded from a JSON array of
{"code": ..., "name": ...} records.

The table is loaded once, on first use, behind a lock-and-check guard so
concurrent first lookups load it exactly once. After that, lookups read
the table without locking.

Lookup rules:
- Inputs shorter than 2 characters resolve to ''.
- A 3-character exact match wins.
- Otherwise the first code (in load order) sharing the input's first two
  characters is used. A 3-character miss also falls through to this scan.

Usage:
    from vincodec.manufacturer import getWorldManufacturer

    name = getWorldManufacturer('1HGCM82633A004352')  # 'Honda'
"""

import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from pydantic import TypeAdapter, ValidationError

from .constants import WMI_LENGTH, WMI_PREFIX_LENGTH
from .exceptions import ManufacturerDataError
from .types import ManufacturerRecord

logger = logging.getLogger(__name__)

DEFAULT_MANUFACTURER_DATA_PATH = Path(__file__).resolve().parent / 'data' / 'manufacturers.json'

_recordListAdapter = TypeAdapter(list[ManufacturerRecord])


# ================================================================================
# Reference Data Loading
# ================================================================================

def loadManufacturerRecords(dataPath: str | Path) -> list[ManufacturerRecord]:
    """
    Read and validate manufacturer reference data from a JSON file.

    Args:
        dataPath: Path to a JSON array of {"code", "name"} objects

    Returns:
        Records in file order

    Raises:
        ManufacturerDataError: If the file is missing, unreadable, not valid
            JSON, fails record validation or holds no records
    """
    path = Path(dataPath)

    try:
        rawData = path.read_bytes()
    except OSError as e:
        raise ManufacturerDataError(
            f"Manufacturer data not readable: {path}",
            details={'path': str(path), 'error': str(e)}
        ) from e

    try:
        records = _recordListAdapter.validate_json(rawData)
    except ValidationError as e:
        raise ManufacturerDataError(
            f"Manufacturer data is malformed: {path}",
            details={'path': str(path), 'errorCount': e.error_count(), 'error': str(e)}
        ) from e

    if not records:
        raise ManufacturerDataError(
            f"Manufacturer data contains no records: {path}",
            details={'path': str(path)}
        )

    logger.debug(f"Read {len(records)} manufacturer records from {path}")
    return records


def buildManufacturerMap(records: Iterable[ManufacturerRecord]) -> dict[str, str]:
    """
    Build a code to name map, keeping the first record for duplicate codes.

    Args:
        records: Manufacturer records in load order

    Returns:
        Insertion-ordered dictionary of code to name
    """
    codeMap: dict[str, str] = {}
    duplicates = 0

    for record in records:
        if record.code in codeMap:
            duplicates += 1
            continue
        codeMap[record.code] = record.name

    if duplicates:
        logger.warning(f"Ignored {duplicates} duplicate manufacturer codes")

    return codeMap


def resolveManufacturer(table: Mapping[str, str], vinOrWmi: str | None) -> str:
    """
    Resolve a VIN or WMI prefix against a code to name table.

    Args:
        table: Insertion-ordered code to name mapping
        vinOrWmi: Full VIN, WMI, or 2-character prefix

    Returns:
        Manufacturer name, or '' if not found
    """
    if not vinOrWmi or len(vinOrWmi) < WMI_PREFIX_LENGTH:
        return ''

    if len(vinOrWmi) > WMI_PREFIX_LENGTH:
        name = table.get(vinOrWmi[:WMI_LENGTH])
        if name is not None:
            return name

    prefix = vinOrWmi[:WMI_PREFIX_LENGTH]
    for code, name in table.items():
        if code.startswith(prefix):
            return name

    return ''


# ================================================================================
# Lazy Table
# ================================================================================

class ManufacturerTable:
    """
    Lazily loaded, read-only manufacturer lookup table.

    The first call to ensureLoaded() (directly or through lookup()) runs the
    loader under a lock. Concurrent first callers wait for that single load.
    If the loader raises, the table stays unloaded and the error propagates;
    the next call attempts the load again.

    Attributes:
        dataPath: Reference data file used by the default loader

    Example:
        table = ManufacturerTable('/etc/vincodec/manufacturers.json')
        table.lookup('WBA3A5C51CF256651')  # 'BMW'
    """

    def __init__(
        self,
        dataPath: str | Path | None = None,
        loader: Callable[[], Iterable[ManufacturerRecord]] | None = None
    ):
        """
        Initialize the table without loading it.

        Args:
            dataPath: Reference data file (defaults to the packaged data)
            loader: Callable returning records; overrides dataPath
        """
        self.dataPath = Path(dataPath) if dataPath else DEFAULT_MANUFACTURER_DATA_PATH
        self._loader = loader or (lambda: loadManufacturerRecords(self.dataPath))
        self._lock = threading.Lock()
        self._table: Mapping[str, str] | None = None

    @classmethod
    def fromMapping(cls, mapping: Mapping[str, str]) -> 'ManufacturerTable':
        """
        Create an already-loaded table from a code to name mapping.

        Args:
            mapping: Code to name mapping; its iteration order is kept

        Returns:
            Loaded ManufacturerTable
        """
        table = cls(loader=lambda: [])
        table._table = MappingProxyType(dict(mapping))
        return table

    @property
    def isLoaded(self) -> bool:
        """True once the table has been filled."""
        return self._table is not None

    def ensureLoaded(self) -> Mapping[str, str]:
        """
        Load the table if needed and return it.

        Returns:
            Read-only code to name mapping

        Raises:
            ManufacturerDataError: If the reference data cannot be loaded
        """
        table = self._table
        if table is not None:
            return table

        with self._lock:
            if self._table is None:
                codeMap = buildManufacturerMap(self._loader())
                if not codeMap:
                    logger.warning("Manufacturer table loaded with no entries")
                self._table = MappingProxyType(codeMap)
                logger.info(f"Manufacturer table loaded | entries={len(codeMap)}")
            return self._table

    def lookup(self, vinOrWmi: str | None) -> str:
        """
        Resolve a VIN or WMI prefix to a manufacturer name.

        Malformed input returns '' without loading the table.

        Args:
            vinOrWmi: Full VIN, WMI, or 2-character prefix

        Returns:
            Manufacturer name, or '' if not found
        """
        if not vinOrWmi or len(vinOrWmi) < WMI_PREFIX_LENGTH:
            return ''
        return resolveManufacturer(self.ensureLoaded(), vinOrWmi)

    def __len__(self) -> int:
        return len(self.ensureLoaded())


# ================================================================================
# Process-wide Default Table
# ================================================================================

_defaultTable = ManufacturerTable()


def getDefaultManufacturerTable() -> ManufacturerTable:
    """Get the process-wide table backed by the packaged reference data."""
    return _defaultTable


def getWorldManufacturer(vinOrWmi: str | None) -> str:
    """
    Resolve a VIN or WMI prefix using the packaged reference data.

    Args:
        vinOrWmi: Full VIN, WMI, or 2-character prefix

    Returns:
        Manufacturer name, or '' if not found
    """
    return _defaultTable.lookup(vinOrWmi)
