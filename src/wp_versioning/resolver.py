"""Resolution of the ``indexFile`` input into a versioning target."""

from pathlib import Path
from typing import Optional

from .config import Config, get_config
from .logger import get_logger
from .models import Target, TargetKind

logger = get_logger()


def resolve_target(index_file: Optional[str] = None, config: Optional[Config] = None) -> Target:
    """Decide which file holds the version record.

    Args:
        index_file: Value of the ``indexFile`` input. Empty, None or the
            default file name select the default ``./style.css``; the
            manifest path selects manifest mode; anything else is an
            explicit header file.

    Returns:
        Resolved Target.

    Example:
        >>> resolve_target("").kind
        <TargetKind.DEFAULT: 'default'>
        >>> resolve_target("./package.json").kind
        <TargetKind.MANIFEST: 'manifest'>
    """
    config = config or get_config()
    default_file = config.input.default_index_file

    if not index_file or index_file == default_file:
        target = Target(kind=TargetKind.DEFAULT, path=Path(".") / default_file)
    elif index_file == config.input.manifest_path:
        target = Target(kind=TargetKind.MANIFEST, path=Path(index_file))
    else:
        target = Target(kind=TargetKind.EXPLICIT, path=Path(index_file))

    logger.debug(f"Resolved indexFile={index_file!r} to {target.kind.value} target {target.path}")
    return target
