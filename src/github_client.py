#!/usr/bin/env python3
"""
GitHub client utilities
"""

import json
import os
import re

from typing import Callable, List, Optional
from github import Github
import requests
from constants import GITHUB_API_URL, MANIFEST_FILENAME
from models import PullRequestSummary

REPO_URL_PATTERN = re.compile(r"github\.com[/:]([\w.-]+)/([\w.-]+?)(?:\.git)?/?$")
REPO_SLUG_PATTERN = re.compile(r"^([\w.-]+)/([\w.-]+)$")


class GitHubClient:
    def __init__(self, github_token: str, repository: str):
        if not github_token:
            raise ValueError("Missing GitHub token (INPUT_GITHUB_TOKEN or GITHUB_TOKEN)")
        if not repository or not REPO_SLUG_PATTERN.match(repository):
            raise ValueError(f"Invalid GitHub repository '{repository}', expected 'owner/repo'")

        self.github_token = github_token
        self.repository = repository
        self.owner = repository.split("/")[0]
        self.github = Github(self.github_token)
        self._repo = None

    @classmethod
    def from_local(cls, dir: str, github_token: Optional[str] = None) -> "GitHubClient":
        """Create a client for the repository of the package in `dir`"""
        token = github_token or os.getenv("INPUT_GITHUB_TOKEN") or os.getenv("GITHUB_TOKEN")
        repository = os.getenv("GITHUB_REPOSITORY") or get_repository_from_manifest(dir)
        return cls(token, repository)

    @property
    def repo(self):
        if self._repo is None:
            self._repo = self.github.get_repo(self.repository)
        return self._repo

    def _create_headers(self) -> dict:
        return {
            "Authorization": f"token {self.github_token}",
            "Accept": "application/vnd.github.v3+json"
        }

    def get_open_prs_from_branch(self, branch: str) -> List[PullRequestSummary]:
        """List open PRs whose head is `branch` of this repository"""
        url = f"{GITHUB_API_URL}/repos/{self.repository}/pulls"
        params = {"state": "open", "head": f"{self.owner}:{branch}", "per_page": 100}
        response = requests.get(url, headers=self._create_headers(), params=params, timeout=30)
        response.raise_for_status()

        return [
            PullRequestSummary(number=pr["number"], title=pr.get("title", ""))
            for pr in response.json()
        ]

    def comment_to_pr(self, number: int, body: str, is_target_comment: Callable[[str], bool]) -> None:
        """
        Post a comment on PR `number`, or edit the first existing comment
        for which `is_target_comment(comment.body)` is true
        """
        pr = self.repo.get_pull(number)

        for comment in pr.get_issue_comments():
            if comment.body and is_target_comment(comment.body):
                comment.edit(body)
                print(f"Updated existing comment on PR #{number}")
                return

        pr.create_issue_comment(body)
        print(f"Created new comment on PR #{number}")


def get_repository_from_manifest(dir: str) -> Optional[str]:
    """Read 'owner/repo' from the package manifest repository field"""
    manifest_path = os.path.join(dir, MANIFEST_FILENAME)
    if not os.path.exists(manifest_path):
        return None

    with open(manifest_path, "r") as f:
        manifest = json.load(f)

    repository = manifest.get("repository")
    if isinstance(repository, dict):
        repository = repository.get("url")
    if not repository:
        return None

    match = REPO_URL_PATTERN.search(repository)
    if match:
        return f"{match.group(1)}/{match.group(2)}"
    if REPO_SLUG_PATTERN.match(repository):
        return repository
    return None
