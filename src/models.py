#!/usr/bin/env python3
"""
Data models for the DAppNode build action
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from constants import DEFAULT_DIR


class RefType(str, Enum):
    BRANCH = "branch"
    TAG = "tag"
    OTHER = "other"


class ActionKind(str, Enum):
    UPLOAD_AND_COMMENT = "upload_and_comment"
    TEST_BUILD = "test_build"


@dataclass(frozen=True)
class GithubContext:
    """CI event context, read once from the Actions environment"""
    event_name: Optional[str]
    sha: str
    ref: str


@dataclass(frozen=True)
class GithubRef:
    """Parsed git ref. `name` is only set for branches and tags"""
    type: RefType
    name: Optional[str] = None
    raw: str = ""


@dataclass(frozen=True)
class BuildConfig:
    """Options forwarded to the SDK build command"""
    provider: str
    upload_to: str
    dir: str = DEFAULT_DIR
    skip_save: bool = False
    require_git_data: bool = False
    delete_old_pins: bool = False
    verbose: bool = False


@dataclass(frozen=True)
class BuildResult:
    release_multi_hash: str


@dataclass(frozen=True)
class PullRequestSummary:
    number: int
    title: str = ""


@dataclass(frozen=True)
class BuildAction:
    """What the handler should do for a given event and ref"""
    kind: ActionKind
    branch: Optional[str] = None
