"""Connection configuration for `mini_mysql.connect`."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3306

# Config file keys that differ from the attribute names.
_KEY_ALIASES = {"pass": "password", "dbname": "name", "username": "user"}
_KNOWN_KEYS = {"host", "port", "socket", "name", "user", "password", "charset"}


@dataclass(frozen=True)
class Config:
    """MySQL connection settings.

    Attributes:
        host: Server host, used when `socket` is not set.
        port: Server TCP port.
        socket: Unix socket path. Takes precedence over `host`/`port`.
        name: Database name.
        user: Login user.
        password: Login password.
        charset: Connection character set.
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    socket: Optional[str] = None
    name: str = ""
    user: str = ""
    password: str = ""
    charset: str = "utf8"

    def __post_init__(self) -> None:
        if isinstance(self.port, bool) or not isinstance(self.port, int):
            raise ValueError(f"port must be an integer, got {self.port!r}.")
        if not 0 < self.port < 65536:
            raise ValueError(f"port out of range: {self.port}.")

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> Config:
        """Build config from a mapping using config-file keys.

        Accepts `host`, `port`, `socket`, `name`, `user`, `pass` (or
        `password`) and `charset`. Missing keys keep their defaults.

        Raises:
            ValueError: On unknown keys or an invalid port.
        """

        values: Dict[str, Any] = {}
        for key, value in raw.items():
            attr = _KEY_ALIASES.get(key, key)
            if attr not in _KNOWN_KEYS:
                raise ValueError(f"Unknown config key: {key!r}")
            if value is None:
                continue
            values[attr] = value
        if "port" in values and isinstance(values["port"], str):
            try:
                values["port"] = int(values["port"])
            except ValueError as exc:
                raise ValueError(f"port must be an integer, got {values['port']!r}.") from exc
        return cls(**values)

    @classmethod
    def from_yaml(cls, path: Union[str, Path], *, section: Optional[str] = None) -> Config:
        """Load config from a YAML file, optionally from one top-level section."""

        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        if section is not None:
            raw = raw.get(section) or {}
        if not isinstance(raw, Mapping):
            raise ValueError(f"Config in {path} must be a mapping.")
        return cls.from_mapping(raw)

    def target(self) -> str:
        """Describe where the connection goes (`unix(...)` or `tcp(host:port)`)."""

        if self.socket:
            return f"unix({self.socket})"
        return f"tcp({self.host}:{self.port})"

    def connect_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for `pymysql.connect`."""

        kwargs: Dict[str, Any] = {
            "user": self.user,
            "password": self.password,
            "database": self.name or None,
            "charset": self.charset,
        }
        if self.socket:
            kwargs["unix_socket"] = self.socket
        else:
            kwargs["host"] = self.host
            kwargs["port"] = self.port
        return kwargs

    def __repr__(self) -> str:
        return (
            f"Config(target={self.target()!r}, name={self.name!r}, "
            f"user={self.user!r}, charset={self.charset!r})"
        )
