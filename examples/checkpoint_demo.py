# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Checkpoint Demo: Validate, Then Tidy Up.

This demo walks through the three things checkpoint does:
- validating a value against a descriptor and reading the result tree
- rejecting malformed descriptors before any data is looked at
- rewriting a copy of a mapping with clean / replace / trim

Run with:
    python examples/checkpoint_demo.py
"""

import os
import tempfile

from checkpoint import ABSENT, ConfigurationError, ShapeMismatchError, checkpoint, load_descriptor

SIGNUPS_DESCRIPTOR = """
type: array
arrayType: object
schema:
  email:
    isRequired: true
    type: string
    stringValidation:
      isLength: {min: 3, max: 64}
  plan:
    type: string
    stringValidation:
      isIn: [free, team, enterprise]
  born:
    allowNull: true
    stringValidation:
      isDate: true
options:
  requireMode: none
"""


def _banner(title):
    print("\n" + "=" * 70)
    print(title)
    print("=" * 70)


def demo_validate_from_file():
    """Load a descriptor from YAML and validate a batch of records."""
    _banner("DEMO 1: Validating records against a YAML descriptor")

    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        f.write(SIGNUPS_DESCRIPTOR)
        temp_path = f.name

    try:
        descriptor = load_descriptor(temp_path)
    finally:
        os.unlink(temp_path)

    signups = [
        {"email": "ada@example.com", "plan": "team", "born": "1815-12-10"},
        {"email": "x", "plan": "gold", "born": "1815-13-10"},
        {"plan": "free", "born": None},
    ]
    result = checkpoint(signups).validate(descriptor)

    print(f"\n  pass: {result.pass_}")
    print("\n  Passed fields:")
    for entry in result.show_passed_results():
        print(f"    {entry}")
    print("\n  Failed reasons:")
    for reason in result.show_failed_results():
        print(f"    {reason}")
    print(f"\n  Missing (index, field): {result.results.missing}")


def demo_exit_asap():
    """Stop at the first failure when only a yes/no answer is needed."""
    _banner("DEMO 2: exitASAP")

    descriptor = {
        "type": "array",
        "arrayType": "primitive",
        "schema": {"type": "number"},
        "options": {"exitASAP": True},
    }
    result = checkpoint([1, "two", None, 4]).validate(descriptor)

    print(f"\n  pass: {result.pass_}")
    print(f"  evaluated elements: {len(result.results.data)} of 4")
    print(f"  reasons: {result.show_failed_results()}")


def demo_contract_errors():
    """Malformed descriptors and wrong shapes are raised, not reported."""
    _banner("DEMO 3: Contract errors")

    try:
        checkpoint({"a": 1}).validate({"type": "object", "schema": {"a": {"isRequred": True}}})
    except ConfigurationError as e:
        print(f"\n  ConfigurationError: {e}")

    try:
        checkpoint([1, 2]).validate({"type": "object"})
    except ShapeMismatchError as e:
        print(f"  ShapeMismatchError: {e}")


def demo_transform():
    """Rewrite a copy of a form submission."""
    _banner("DEMO 4: Transform pipeline")

    form = {"name": "   Ada  ", "nickname": ABSENT, "team": ABSENT, "city": " London "}
    tidy = (
        checkpoint(form)
        .transform({"name": "replace", "options": [ABSENT, None]})
        .transform("trim")
        .output()
    )
    compact = checkpoint(form).transform(["clean", "trim"]).output()

    print(f"\n  original: {form}")
    print(f"  replace + trim: {tidy}")
    print(f"  clean + trim:   {compact}")


def main():
    demo_validate_from_file()
    demo_exit_asap()
    demo_contract_errors()
    demo_transform()


if __name__ == "__main__":
    main()
