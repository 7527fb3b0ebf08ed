#!/usr/bin/env python3
"""
Constants for the DAppNode build action
"""

# Persistent tag appended to every build bot comment (for update/replace functionality)
BOT_COMMENT_TAG = "(by dappnodebot/build-action)"

# Default package directory, same as the SDK's
DEFAULT_DIR = "./"

# Branches that are never deleted, so their releases are never uploaded to pinata
NON_UPLOAD_BRANCHES = ("HEAD", "master", "main")

# Base URL of the DAppNode admin UI installer
ADMIN_UI_INSTALLER_URL = "http://my.dappnode/installer"

# Package manifest used to locate the repository when GITHUB_REPOSITORY is not set
MANIFEST_FILENAME = "dappnode_package.json"

# External build tool
DEFAULT_SDK_COMMAND = "npx @dappnode/dappnodesdk build"
DEFAULT_BUILD_TIMEOUT = 3600

GITHUB_API_URL = "https://api.github.com"
