from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional


# -------------------------
# Storage config
# -------------------------

@dataclass
class StorageConfig:
    """
    Where the CSV files live and how they are encoded.
    Repositories take explicit paths; this is the usual way to build them.
    """
    data_dir: str = "data"
    customers_file: str = "customers.csv"
    orders_file: str = "orders.csv"
    encoding: str = "utf-8"
    delimiter: str = ","

    def validate(self) -> None:
        if not self.data_dir:
            raise ValueError("storage.data_dir must not be empty.")
        if not self.customers_file:
            raise ValueError("storage.customers_file must not be empty.")
        if not self.orders_file:
            raise ValueError("storage.orders_file must not be empty.")
        if len(self.delimiter) != 1:
            raise ValueError(f"storage.delimiter must be a single character. Got '{self.delimiter}'.")
        if not self.encoding:
            raise ValueError("storage.encoding must not be empty.")

    @property
    def customers_path(self) -> Path:
        return Path(self.data_dir) / self.customers_file

    @property
    def orders_path(self) -> Path:
        return Path(self.data_dir) / self.orders_file

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "StorageConfig":
        """
        Build from ORDERS_DATA_DIR / ORDERS_CUSTOMERS_FILE / ORDERS_ORDERS_FILE,
        falling back to the defaults for unset variables.
        """
        env = os.environ if environ is None else environ
        cfg = cls(
            data_dir=env.get("ORDERS_DATA_DIR", cls.data_dir),
            customers_file=env.get("ORDERS_CUSTOMERS_FILE", cls.customers_file),
            orders_file=env.get("ORDERS_ORDERS_FILE", cls.orders_file),
        )
        cfg.validate()
        return cfg
