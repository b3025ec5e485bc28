from __future__ import annotations

import sitemanifest


def test_version_matches_project_metadata() -> None:
    assert sitemanifest.__version__ == "0.1.0"
