#!/usr/bin/env python3
"""
Links to the DAppNode admin UI
"""

from urllib.parse import quote

from constants import ADMIN_UI_INSTALLER_URL


def get_install_dnp_link(release_multi_hash: str) -> str:
    """Installer link for a release, e.g. '/ipfs/Qm..' -> '.../public/%2Fipfs%2FQm..'"""
    return f"{ADMIN_UI_INSTALLER_URL}/public/{quote(release_multi_hash, safe='')}"
