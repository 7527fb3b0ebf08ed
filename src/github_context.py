#!/usr/bin/env python3
"""
GitHub Actions context helpers
"""

import os

from models import GithubContext, GithubRef, RefType

BRANCH_PREFIX = "refs/heads/"
TAG_PREFIX = "refs/tags/"


def get_github_context() -> GithubContext:
    """Read the triggering event from the variables GitHub Actions sets on the runner"""
    return GithubContext(
        event_name=os.getenv("GITHUB_EVENT_NAME") or None,
        sha=os.getenv("GITHUB_SHA", ""),
        ref=os.getenv("GITHUB_REF", ""),
    )


def parse_ref(ref: str) -> GithubRef:
    """
    Classify a raw git ref.

    'refs/heads/feat/x' -> branch 'feat/x'
    'refs/tags/v1.0.0'  -> tag 'v1.0.0'
    anything else (e.g. 'refs/pull/12/merge') -> other
    """
    if ref.startswith(BRANCH_PREFIX) and len(ref) > len(BRANCH_PREFIX):
        return GithubRef(RefType.BRANCH, ref[len(BRANCH_PREFIX):], ref)
    if ref.startswith(TAG_PREFIX) and len(ref) > len(TAG_PREFIX):
        return GithubRef(RefType.TAG, ref[len(TAG_PREFIX):], ref)
    return GithubRef(RefType.OTHER, None, ref)
