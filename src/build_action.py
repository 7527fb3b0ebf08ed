#!/usr/bin/env python3
"""
Build action handler, meant to run on 'push' and 'pull_request' events

For 'push' events (branch):
  Does a build and uploads the release to Pinata (IPFS). It will also locate
  any open PRs from that branch and comment the resulting hash, so it can be
  used by testers. Releases of branches that are never deleted (HEAD, master,
  main) are not uploaded.

For 'push' events (tag):
  Only a test build. Publishing on tags is done by another action.

For 'pull_request' events:
  Does a test build but doesn't upload the result anywhere.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from build_client import BuildClient
from constants import BOT_COMMENT_TAG, DEFAULT_DIR, NON_UPLOAD_BRANCHES
from errors import ContextError, UnsupportedEventError
from github_client import GitHubClient
from github_context import get_github_context, parse_ref
from links import get_install_dnp_link
from models import ActionKind, BuildAction, BuildConfig, GithubRef, RefType


def decide_action(event_name: Optional[str], ref: GithubRef) -> BuildAction:
    """Pick what to do for an event, without touching the network"""
    if (
        event_name == "push"
        and ref.type == RefType.BRANCH
        and ref.name not in NON_UPLOAD_BRANCHES
    ):
        return BuildAction(ActionKind.UPLOAD_AND_COMMENT, branch=ref.name)

    if event_name in ("push", "pull_request"):
        return BuildAction(ActionKind.TEST_BUILD)

    if not event_name:
        raise ContextError()

    raise UnsupportedEventError(event_name)


def gh_build_handler(
    dir: str = DEFAULT_DIR,
    github: Optional[GitHubClient] = None,
    builder: Optional[BuildClient] = None,
) -> None:
    """Common handler for CLI and programmatic usage"""
    context = get_github_context()
    ref = parse_ref(context.ref)
    action = decide_action(context.event_name, ref)
    print(f"🔍 Event '{context.event_name}' on {ref.type.value} '{ref.name or ref.raw}': {action.kind.value}")

    builder = builder or BuildClient()

    if action.kind == ActionKind.UPLOAD_AND_COMMENT:
        result = builder.build(BuildConfig(
            provider="pinata",
            upload_to="ipfs",
            dir=dir,
            require_git_data=True,
            delete_old_pins=True,
            verbose=True,
        ))

        body = get_build_bot_comment(context.sha, result.release_multi_hash)
        print(f"Build bot comment: \n\n{body}")

        # Connect to the Github REST API and post or edit a comment on each PR
        github = github or GitHubClient.from_local(dir)
        prs = github.get_open_prs_from_branch(action.branch)
        print(f"PRs: {', '.join(str(pr.number) for pr in prs)}")

        with ThreadPoolExecutor(max_workers=max(len(prs), 1)) as executor:
            futures = [
                executor.submit(github.comment_to_pr, pr.number, body, is_target_comment)
                for pr in prs
            ]
        # The executor waits for every post, then the first failure is re-raised
        for future in futures:
            future.result()
        return

    # For 'pull_request' the sha is not a known commit: the incoming branch is
    # merged into the target branch and the resulting new commit is tested.
    # By default just do a test build and skip_save
    builder.build(BuildConfig(
        provider="dappnode",
        upload_to="ipfs",
        dir=dir,
        skip_save=True,
        verbose=True,
    ))


def get_build_bot_comment(commit_sha: str, release_multi_hash: str) -> str:
    """
    Returns formatted comment with build result info.
    The comment includes BOT_COMMENT_TAG, which `is_target_comment()` then
    uses to locate any existing comment
    """
    install_link = get_install_dnp_link(release_multi_hash)

    return f"""DAppNode bot has built and pinned the release to an IPFS node, for commit: {commit_sha}

This is a development version and should **only** be installed for testing purposes, [install link]({install_link})

```
{release_multi_hash}
```

{BOT_COMMENT_TAG}
"""


def is_target_comment(comment_body: str) -> bool:
    """Locates any existing comment by the persistent tag used in all build bot comments"""
    return BOT_COMMENT_TAG in comment_body
