"""Zentrales Logging-Modul für wp-versioning.

Dieses Modul stellt einen konfigurierbaren Logger bereit, der auf die
Konsole und optional in eine Datei schreibt.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional


def setup_logger(
    name: str = "wp_versioning",
    level: int = None,
    log_file: Optional[Path] = None,
    console_output: bool = True,
) -> logging.Logger:
    """Konfiguriert und gibt einen Logger zurück.

    Args:
        name: Name des Loggers (Default: "wp_versioning").
        level: Logging-Level. Falls None, wird config.logging.level verwendet.
        log_file: Optional. Pfad zur Log-Datei. Falls None, wird
                 config.logging.file verwendet (kann ebenfalls None sein).
        console_output: Wenn True, wird zusätzlich auf die Konsole geloggt.

    Returns:
        Konfigurierter Logger.

    Example:
        >>> logger = setup_logger()
        >>> logger.info("Lese style.css")
    """
    if level is None or log_file is None:
        from .config import get_config

        config = get_config()

        if level is None:
            level_str = config.logging.level.upper()
            level = getattr(logging, level_str, logging.INFO)

        if log_file is None:
            log_file = config.logging.file

    logger = logging.getLogger(name)
    logger.setLevel(level)

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Console Handler nur beim ersten Aufruf (stderr, damit stdout frei für Workflow-Kommandos bleibt).
    # Kein eigenes Level: das Logger-Level filtert, auch nach erneutem setup_logger().
    if console_output and not logger.handlers:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    # File Handler auch nachträglich ergänzen, z.B. wenn main() eine andere Config lädt
    if log_file and not _has_file_handler(logger, log_file):
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def _has_file_handler(logger: logging.Logger, log_file: Path) -> bool:
    target = os.path.abspath(log_file)
    return any(
        isinstance(handler, logging.FileHandler) and handler.baseFilename == target for handler in logger.handlers
    )


def get_logger(name: str = "wp_versioning") -> logging.Logger:
    """Gibt einen existierenden Logger zurück oder erstellt einen neuen.

    Args:
        name: Name des Loggers (Default: "wp_versioning").

    Returns:
        Logger-Instanz.

    Example:
        >>> from wp_versioning.logger import get_logger
        >>> logger = get_logger()
        >>> logger.info("Nachricht")
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger = setup_logger(name)

    return logger
