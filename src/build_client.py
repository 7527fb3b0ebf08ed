#!/usr/bin/env python3
"""
Build client: runs the DAppNode SDK build command
"""

import os
import re
import shlex
import subprocess
from typing import List, Optional

from constants import DEFAULT_BUILD_TIMEOUT, DEFAULT_SDK_COMMAND
from errors import BuildError
from models import BuildConfig, BuildResult

# The SDK prints the release hash as '/ipfs/<cid>', labeled on its summary line
RELEASE_HASH_PATTERN = re.compile(r"/ipfs/[A-Za-z0-9]{46,}")
LABELED_RELEASE_HASH_PATTERN = re.compile(r"Release hash\s*:\s*(/ipfs/[A-Za-z0-9]{46,})")


def _to_text(output) -> str:
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="replace")
    return output or ""


class BuildClient:
    """Client for the external package build pipeline"""

    def __init__(self, command: Optional[str] = None, timeout: Optional[int] = None):
        self.command = shlex.split(command or os.getenv("INPUT_SDK_COMMAND") or DEFAULT_SDK_COMMAND)
        self.timeout = timeout or int(os.getenv("INPUT_BUILD_TIMEOUT") or DEFAULT_BUILD_TIMEOUT)

    def build(self, config: BuildConfig) -> BuildResult:
        """Build the package in `config.dir` and return the release hash"""
        args = self._create_args(config)
        print(f"🏗️  Running build: {' '.join(args)}")

        try:
            completed = subprocess.run(
                args,
                cwd=config.dir,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            # Output collected before the kill may be bytes even in text mode
            self._print_output(_to_text(e.stdout), _to_text(e.stderr))
            raise BuildError(
                f"Build timed out after {self.timeout}s",
                stderr=_to_text(e.stderr),
            ) from e

        if config.verbose or completed.returncode != 0:
            self._print_output(completed.stdout, completed.stderr)

        if completed.returncode != 0:
            stderr_tail = completed.stderr[-2000:] if completed.stderr else ""
            raise BuildError(
                f"Build failed with exit code {completed.returncode}\n{stderr_tail}",
                returncode=completed.returncode,
                stderr=completed.stderr,
            )

        release_multi_hash = self._parse_release_hash(completed.stdout)
        if not release_multi_hash and not config.skip_save:
            raise BuildError("Build succeeded but no release hash was found in its output")

        print(f"✅ Build complete {release_multi_hash}".rstrip())
        return BuildResult(release_multi_hash=release_multi_hash)

    def _print_output(self, stdout: str, stderr: str) -> None:
        if stdout:
            print(stdout)
        if stderr:
            print(f"📋 Build stderr:\n{stderr}")

    def _create_args(self, config: BuildConfig) -> List[str]:
        """Translate a build config into SDK command line flags"""
        args = list(self.command)
        args += ["--provider", config.provider, "--upload_to", config.upload_to, "--dir", config.dir]

        flags = {
            "--skip_save": config.skip_save,
            "--require_git_data": config.require_git_data,
            "--delete_old_pins": config.delete_old_pins,
            "--verbose": config.verbose,
        }
        args += [flag for flag, enabled in flags.items() if enabled]
        return args

    def _parse_release_hash(self, output: str) -> str:
        """
        Hash on the 'Release hash :' line. Without that label, the last
        '/ipfs/<cid>' in the output, or '' if there is none
        """
        output = output or ""
        labeled = LABELED_RELEASE_HASH_PATTERN.findall(output)
        if labeled:
            return labeled[-1]
        matches = RELEASE_HASH_PATTERN.findall(output)
        return matches[-1] if matches else ""
