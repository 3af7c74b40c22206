"""
Output file naming.

Handles how output files are named:
- File stem per image, from the original file name or a custom name
- Output path in the output directory
- Illegal file name detection for user supplied names
"""

import logging
from pathlib import Path
from typing import Union

from autocrop.common.constants import OutputConstants
from autocrop.common.enums import NameType
from autocrop.exceptions import NamingError
from autocrop.schemas.crop import FileName

logger = logging.getLogger(__name__)


def original_stem(source_path: Union[str, Path]) -> str:
    """
    Name of the source file without its extension.

    Falls back to the full file name when there is no stem.

    Raises:
        NamingError: If the path has neither
    """
    path = Path(source_path)
    name = path.stem or path.name
    if not name:
        raise NamingError(str(source_path))
    return name


def output_stem(
    index: int, source_path: Union[str, Path], bg_name: FileName, file_name: FileName
) -> str:
    """
    File stem for the image at batch position ``index``.

    Args:
        index: Position in the batch, 0 is the background
        source_path: Path the image was loaded from
        bg_name: Naming scheme for the background
        file_name: Naming scheme for every other image

    Returns:
        File stem without extension

    Raises:
        NamingError: If an original name is requested but cannot be derived
    """
    naming = bg_name if index == 0 else file_name

    if naming.name_type == NameType.ORIGINAL:
        return original_stem(source_path)

    if index == 0:
        return naming.name
    # Comparison images are numbered from 1
    return f"{naming.name}{index}"


def output_path(output_dir: Union[str, Path], stem: str) -> Path:
    """Output file path for a stem."""
    return Path(output_dir) / f"{stem}{OutputConstants.EXTENSION}"


def is_illegal_filename(name: str) -> bool:
    """
    Check whether a name is unusable as a file name.

    Catches empty names, control characters, characters Windows rejects and
    Windows reserved device names. Not exhaustive.

    Args:
        name: Candidate file name without extension

    Returns:
        True if the name is illegal
    """
    if not name:
        return True

    if any(ord(c) <= OutputConstants.MAX_CONTROL_CODE_POINT for c in name):
        return True

    if any(c in OutputConstants.ILLEGAL_CHARACTERS for c in name):
        return True

    return name.upper() in OutputConstants.RESERVED_NAMES
