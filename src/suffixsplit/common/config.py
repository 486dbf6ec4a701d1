import os
from glob import glob
from pathlib import Path
from typing import List, Optional

from suffixsplit.common.defaults import LIST_PATH_ENV


def get_default_list_path() -> Optional[Path]:
    value = os.getenv(LIST_PATH_ENV, "").strip()
    return Path(value) if value else None


class Config:
    def __init__(self, args):
        # Input configurations
        self.input_files = Config.__prepare_input_files(args.input_files)
        self.hosts = Config.__prepare_hosts(args.hosts, self.input_files)

        # Rule list configurations
        self.list_path = args.list_path
        self.ignore_private = args.ignore_private
        self.strict = args.strict

        # Output configurations
        self.output_file = args.output_file
        self.log_level = args.log_level

    @staticmethod
    def __prepare_input_files(input_files: List[str]):
        file_names = []
        for f in input_files:
            file_names += glob(f)
        file_names = set(file_names)
        return sorted(file for file in file_names if os.path.isfile(file))

    @staticmethod
    def __prepare_hosts(hosts: List[str], input_files: List[str]):
        out = list(hosts)
        for file_name in input_files:
            with open(file_name, "r", encoding="utf-8") as f:
                for raw in f:
                    line = raw.strip()
                    if line and not line.startswith("#"):
                        out.append(line)
        return out
