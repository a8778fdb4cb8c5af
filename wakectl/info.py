import os

__app_name__ = "WakeCtl"
__package_name__ = "wakectl"

with open(os.path.join(os.path.dirname(__file__), "VERSION"), "r") as version_file:
    __version__ = version_file.read().strip()

__description__ = "Send Wake-on-LAN magic packets to hosts by MAC address or by a stored alias."
__author__ = "WakeCtl Developers"
__author_email__ = ""
__license__ = "GPLv3"
