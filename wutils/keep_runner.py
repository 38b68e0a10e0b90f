"""Background keep-alive tasks driven by a reloadable YAML configuration."""

import logging
import os
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Union

import yaml

from wutils.log import get_logger

CONFIG_PATH = "./config/cmd/wutils.yml"

PathLike = Union[str, os.PathLike]


@dataclass
class RunnerConfig:
    """Settings read from the runner's YAML file."""

    dsg_disks: list[str] = field(default_factory=list)
    debug: bool = False
    refresh_delay: int = 10
    parallel_dsg: bool = False
    parallel_ol: bool = False
    dsg_delay: int = 30
    ol_delay: int = 2
    ol_patterns: list[tuple[str, int]] = field(default_factory=list)


def _section(data: dict, key: str) -> dict:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"'{key}' must be a mapping")
    return value


def _int(section: dict, key: str, default: int) -> int:
    value = section.get(key)
    if value is None or value == 0:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{key}' must be an integer")
    return value


def _bool(section: dict, key: str) -> bool:
    value = section.get(key, False)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"'{key}' must be a boolean")
    return value


def _patterns(section: dict) -> list[tuple[str, int]]:
    patterns = []
    for item in section.get("patterns") or []:
        if not isinstance(item, dict):
            raise ValueError("each ol pattern must be a mapping")
        title = str(item.get("title") or "")
        opacity = item.get("opacity") or 0
        if isinstance(opacity, bool) or not isinstance(opacity, int) or not 0 <= opacity <= 255:
            raise ValueError("ol pattern opacity must be an integer from 0 to 255")
        patterns.append((title, opacity))
    return patterns


def load_config(path: PathLike) -> RunnerConfig:
    """Read a runner configuration; raise ValueError when it is malformed.

    The ``dsg.disk`` list is required; zero or missing numbers take defaults.
    """
    with open(path, encoding="utf-8") as handle:
        data: Any = yaml.safe_load(handle)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("configuration must be a mapping")

    dsg = _section(data, "dsg")
    disks = dsg.get("disk")
    if not isinstance(disks, list):
        raise ValueError("dsg.disk is required, but blank")

    refresh = _section(data, "refresh")
    parallel = _section(data, "parallel")
    ol = _section(data, "ol")
    return RunnerConfig(
        dsg_disks=[str(disk) for disk in disks],
        debug=_bool(data, "debug"),
        refresh_delay=_int(refresh, "delay", 10),
        parallel_dsg=_bool(parallel, "dsg"),
        parallel_ol=_bool(parallel, "ol"),
        dsg_delay=_int(dsg, "delay", 30),
        ol_delay=_int(ol, "delay", 2),
        ol_patterns=_patterns(ol),
    )


class KeepRunner:
    """Holds the current configuration and runs the disk sleep guard."""

    def __init__(
        self,
        config_path: PathLike = CONFIG_PATH,
        logger: Optional[logging.Logger] = None,
        refresh: bool = True,
    ) -> None:
        self.config_path = config_path
        self.logger = logger or get_logger()
        self.config = RunnerConfig()
        self.reload()
        if refresh:
            threading.Thread(target=self._refresh_loop, daemon=True).start()

    def _refresh_loop(self) -> None:
        while True:
            time.sleep(self.config.refresh_delay)
            self.reload()

    def reload(self) -> bool:
        """Load the configuration file again; keep the old settings if it fails."""
        try:
            config = load_config(self.config_path)
        except (OSError, ValueError, yaml.YAMLError) as exc:
            self.logger.debug("config not loaded: %s", exc)
            return False
        config.refresh_delay = max(config.refresh_delay, 1)
        self.config = config
        return True

    def write_stamp(self, disk: str) -> bool:
        """Append a timestamp line to ``<disk>/.dsg``; report whether it was written."""
        target = "/".join([disk, ".dsg"])
        now = datetime.now().astimezone()
        try:
            with open(target, "a", encoding="utf-8") as handle:
                handle.write(f"dsg running at {now:%Y-%m-%d %H:%M:%S.%f %z %Z}\n")
        except OSError as exc:
            self.logger.error("disk format error, please input like 'E:' %s", exc)
            return False
        return True

    def dsg_once(self) -> list[bool]:
        """Stamp every configured disk concurrently; return each disk's outcome."""
        disks = list(self.config.dsg_disks)
        if not disks:
            return []
        with ThreadPoolExecutor(max_workers=len(disks)) as pool:
            return list(pool.map(self.write_stamp, disks))

    def dsg(self) -> None:
        """Keep the configured disks awake, stamping them every ``dsg_delay`` seconds."""
        self.logger.info("dsg disks=%s delay=%s", self.config.dsg_disks, self.config.dsg_delay)
        while True:
            self.dsg_once()
            time.sleep(self.config.dsg_delay)