# src/config.py

import os
from typing import List

from src.domain.models import HostProfile


HOST = "0.0.0.0"
PORT = 3119
LOG_FILE_PATH = os.getenv("SHA256_CHECK_LOG_FILE", "/var/log/sha256-check.log")


def build_host_profiles() -> List[HostProfile]:
    """The compiled-in hosts whose configs can be checked."""
    return [
        HostProfile(
            name="proxmox-dell",
            home_directory="/home/proxmox-dell",
            allowed_files=frozenset({"storage.cfg"}),
            file_directories={"storage.cfg": "storage-cfg"},
            container_directory="lxc",
        ),
        HostProfile(
            name="gateway",
            home_directory="/home/gateway",
            allowed_files=frozenset({"pf.conf", "relayd.conf"}),
            file_directories={
                "pf.conf": "pf",
                "relayd.conf": "relayd",
            },
        ),
        HostProfile(
            name="reverse-proxy",
            home_directory="/home/reverse-proxy",
            allowed_files=frozenset({"pf.conf", "relayd.conf", "httpd.conf"}),
            file_directories={
                "pf.conf": "pf",
                "relayd.conf": "relayd",
                "httpd.conf": "httpd",
            },
        ),
    ]
