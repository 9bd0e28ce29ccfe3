"""Tests for find_calling_module()."""

from __future__ import annotations

import json
import sys
import types
from types import SimpleNamespace
from unittest.mock import patch

import typescan.scanning.caller as caller_mod
from typescan.scanning.caller import OWN_PACKAGE, find_calling_module


def _frames(*module_names: str | None) -> SimpleNamespace | None:
    """Build a fake frame chain, innermost first."""
    frame = None
    for name in reversed(module_names):
        frame = SimpleNamespace(f_globals={"__name__": name}, f_back=frame)
    return frame


class TestFindCallingModule:
    def test_own_package_is_typescan(self) -> None:
        assert OWN_PACKAGE == "typescan"

    def test_returns_this_test_module(self) -> None:
        """Called directly from a test, the test module is the first foreign frame."""
        assert find_calling_module() is sys.modules[__name__]

    def test_innermost_frame_used_when_package_is_foreign(self) -> None:
        """With an unrelated own_package, the caller module itself is the first foreign frame."""
        assert find_calling_module(own_package="no_such_package") is caller_mod

    def test_no_frames_returns_none(self) -> None:
        with patch("typescan.scanning.caller.inspect.currentframe", return_value=None):
            assert find_calling_module() is None

    def test_all_frames_own_returns_none(self) -> None:
        """A stack made only of typescan frames yields None."""
        chain = _frames("typescan.scanning.caller", "typescan.scanning.registry", "typescan")
        with patch("typescan.scanning.caller.inspect.currentframe", return_value=chain):
            assert find_calling_module() is None

    def test_skips_unresolvable_frames(self) -> None:
        """Frames whose module is not in sys.modules are passed over."""
        chain = _frames("typescan.scanning.caller", "not_a_loaded_module_xyz", None, "json")
        with patch("typescan.scanning.caller.inspect.currentframe", return_value=chain):
            assert find_calling_module() is json

    def test_prefix_match_requires_dot(self) -> None:
        """A package named like typescan_extras is not part of typescan."""
        fake = types.ModuleType("typescan_extras")
        with patch.dict(sys.modules, {"typescan_extras": fake}):
            chain = _frames("typescan.scanning.caller", "typescan_extras")
            with patch("typescan.scanning.caller.inspect.currentframe", return_value=chain):
                assert find_calling_module() is fake
