#!/usr/bin/env python3
"""
Tests for GitHub Actions context helpers and links
"""

import os
import sys
import unittest
from unittest.mock import patch

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from github_context import get_github_context, parse_ref
from links import get_install_dnp_link
from models import GithubRef, RefType


class TestGetGithubContext(unittest.TestCase):

    def test_reads_environment(self):
        env = {"GITHUB_EVENT_NAME": "push", "GITHUB_SHA": "abc123", "GITHUB_REF": "refs/heads/feature-x"}
        with patch.dict(os.environ, env, clear=True):
            context = get_github_context()

        self.assertEqual(context.event_name, "push")
        self.assertEqual(context.sha, "abc123")
        self.assertEqual(context.ref, "refs/heads/feature-x")

    def test_outside_actions(self):
        with patch.dict(os.environ, {}, clear=True):
            context = get_github_context()

        self.assertIsNone(context.event_name)
        self.assertEqual(context.sha, "")
        self.assertEqual(context.ref, "")

    def test_empty_event_name(self):
        with patch.dict(os.environ, {"GITHUB_EVENT_NAME": ""}, clear=True):
            self.assertIsNone(get_github_context().event_name)


class TestParseRef(unittest.TestCase):

    def test_branch(self):
        self.assertEqual(
            parse_ref("refs/heads/feature-x"),
            GithubRef(RefType.BRANCH, "feature-x", "refs/heads/feature-x"),
        )

    def test_branch_with_slashes(self):
        ref = parse_ref("refs/heads/dependabot/npm_and_yarn/lodash-4.17.21")
        self.assertEqual(ref.type, RefType.BRANCH)
        self.assertEqual(ref.name, "dependabot/npm_and_yarn/lodash-4.17.21")

    def test_tag(self):
        ref = parse_ref("refs/tags/v0.2.5")
        self.assertEqual(ref.type, RefType.TAG)
        self.assertEqual(ref.name, "v0.2.5")

    def test_other(self):
        for raw in ["refs/pull/12/merge", "", "refs/heads/", "feature-x"]:
            with self.subTest(raw=raw):
                ref = parse_ref(raw)
                self.assertEqual(ref.type, RefType.OTHER)
                self.assertIsNone(ref.name)
                self.assertEqual(ref.raw, raw)


class TestLinks(unittest.TestCase):

    def test_install_link(self):
        self.assertEqual(
            get_install_dnp_link("/ipfs/QmTestHash"),
            "http://my.dappnode/installer/public/%2Fipfs%2FQmTestHash",
        )

    def test_install_link_plain_hash(self):
        self.assertEqual(
            get_install_dnp_link("QmTestHash"),
            "http://my.dappnode/installer/public/QmTestHash",
        )


if __name__ == "__main__":
    unittest.main()
