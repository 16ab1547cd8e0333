#!/usr/bin/env python3
"""
Preflight checker for action.yml
Verifies the manifest parses and wires every input the action reads
"""

import sys
from pathlib import Path
from typing import List, Optional

from electron_action import config
from electron_action.common.errors import ConfigurationError
from electron_action.common.manifest import ActionManifest


def check_manifest_syntax(path: Path) -> Optional[ActionManifest]:
    """Parse action.yml, printing the outcome"""
    try:
        manifest = ActionManifest.load(path)
    except ConfigurationError as e:
        print(f"[FAIL] YAML syntax: {path} - {e}")
        return None
    print(f"[PASS] YAML syntax: {path}")
    return manifest


def check_declared_inputs(manifest: ActionManifest) -> bool:
    """Every input read by the action must be declared, required ones as required"""
    all_passed = True
    for name in config.KNOWN_INPUTS:
        if name not in manifest.inputs:
            print(f"[FAIL] Input declared: {name}")
            all_passed = False
        elif name in config.REQUIRED_INPUTS and not manifest.is_required(name):
            print(f"[FAIL] Input required: {name}")
            all_passed = False
        else:
            print(f"[PASS] Input declared: {name}")
    return all_passed


def check_input_env_mapping(manifest: ActionManifest) -> bool:
    """Composite steps must export each input as INPUT_<NAME>"""
    step_env = manifest.step_env()
    all_passed = True
    for name in config.KNOWN_INPUTS:
        var = f"{config.INPUT_PREFIX}{name}".upper()
        expected = f"${{{{ inputs.{name} }}}}"
        if step_env.get(var) == expected:
            print(f"[PASS] ENV mapping: {var}")
        else:
            print(f"[FAIL] ENV mapping: {var} - expected {expected}")
            all_passed = False
    return all_passed


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    path = Path(args[0]) if args else Path(config.ACTION_MANIFEST)

    print("=== Running Preflight Checker ===")

    manifest = check_manifest_syntax(path)
    all_checks_passed = manifest is not None
    if manifest is not None:
        if not check_declared_inputs(manifest):
            all_checks_passed = False
        if not check_input_env_mapping(manifest):
            all_checks_passed = False

    print("=" * 30)

    if all_checks_passed:
        print("✅ All preflight checks passed")
        return 0
    print("❌ One or more preflight checks failed")
    return 1


if __name__ == '__main__':
    sys.exit(main())
